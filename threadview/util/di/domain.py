"""Domain layer DI providers."""

from dishka import Scope, provide

from threadview.domain.repository import ThreadRepository
from threadview.domain.service import IdGenerator, ThreadService, UuidIdGenerator
from threadview.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped; the thread they act on lives in the
    repository, which outlives the request.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_id_generator(self) -> IdGenerator:
        """Provide comment ID generator."""
        return UuidIdGenerator()

    @provide
    def get_thread_service(
        self, thread_repository: ThreadRepository, id_generator: IdGenerator
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(
            thread_repository=thread_repository, id_generator=id_generator
        )
