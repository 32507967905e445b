"""Application configuration."""

from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class ThreadSettings(BaseModel):
    """Comment thread configuration."""

    # Load the starter thread at process start
    # When False the thread starts empty
    seed_initial_comments: bool = True


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, nested values use a double
    underscore (THREAD__SEED_INITIAL_COMMENTS=false).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Bind address for scripts/start_app.py
    host: str = "0.0.0.0"
    port: int = 8000

    # Nested settings
    thread: ThreadSettings = ThreadSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
