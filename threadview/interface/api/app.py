"""FastAPI application."""

from fastapi import FastAPI

from threadview.interface.api.routes import comments, health
from threadview.util.di.container import create_container, setup_di
from threadview.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py handles this.
    """
    app_instance = FastAPI(
        title="Threadview API",
        description="Threaded comment view: reply, cancel, submit and collapse comments",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)

    return app_instance
