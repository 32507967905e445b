"""Cancel reply use case."""

from pydantic import BaseModel

from threadview.domain.service import ThreadService
from threadview.domain.value import CommentId

from .view import ThreadResponse


class CancelReplyRequest(BaseModel):
    """Cancel reply request."""

    comment_id: str


class CancelReplyUseCase:
    """Use case for closing the reply box without submitting."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize cancel reply use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: CancelReplyRequest) -> ThreadResponse:
        """Execute cancel reply flow.

        Args:
            request: Cancel reply request

        Returns:
            Updated thread
        """
        tree = await self.thread_service.cancel_reply(CommentId(request.comment_id))
        return ThreadResponse.from_domain(tree)
