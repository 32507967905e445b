"""Application layer DI providers."""

from dishka import Scope, provide

from threadview.application.usecase.thread import (
    CancelReplyUseCase,
    GetThreadUseCase,
    SubmitReplyUseCase,
    ToggleCollapseUseCase,
    ToggleReplyUseCase,
)
from threadview.domain.service import ThreadService
from threadview.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_thread_use_case(self, thread_service: ThreadService) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_reply_use_case(
        self, thread_service: ThreadService
    ) -> ToggleReplyUseCase:
        """Provide toggle reply use case."""
        return ToggleReplyUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_cancel_reply_use_case(
        self, thread_service: ThreadService
    ) -> CancelReplyUseCase:
        """Provide cancel reply use case."""
        return CancelReplyUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_collapse_use_case(
        self, thread_service: ThreadService
    ) -> ToggleCollapseUseCase:
        """Provide toggle collapse use case."""
        return ToggleCollapseUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_submit_reply_use_case(
        self, thread_service: ThreadService
    ) -> SubmitReplyUseCase:
        """Provide submit reply use case."""
        return SubmitReplyUseCase(thread_service=thread_service)
