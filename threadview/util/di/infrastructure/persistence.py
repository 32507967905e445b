"""Persistence infrastructure providers."""

from dishka import Scope, provide
import logfire

from threadview.config import ThreadSettings
from threadview.domain.repository import ThreadRepository
from threadview.persistence.repository import InMemoryThreadRepository
from threadview.persistence.seed import INITIAL_THREAD
from threadview.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider holding the thread in process memory.

    The repository is APP-scoped: every request sees and updates the same
    thread for the lifetime of the process.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_thread_repository(self, thread_settings: ThreadSettings) -> ThreadRepository:
        """Provide thread repository, seeded from the starter thread."""
        seed = INITIAL_THREAD if thread_settings.seed_initial_comments else ()
        logfire.info("Thread repository created", seeded=bool(seed))
        return InMemoryThreadRepository(seed=seed)
