"""Toggle reply box use case."""

from pydantic import BaseModel

from threadview.domain.service import ThreadService
from threadview.domain.value import CommentId

from .view import ThreadResponse


class ToggleReplyRequest(BaseModel):
    """Toggle reply box request."""

    comment_id: str


class ToggleReplyUseCase:
    """Use case for opening or closing the reply box under a comment."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize toggle reply use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: ToggleReplyRequest) -> ThreadResponse:
        """Execute toggle reply flow.

        Opening a reply box closes any other open box in the thread.

        Args:
            request: Toggle reply request

        Returns:
            Updated thread
        """
        tree = await self.thread_service.toggle_reply(CommentId(request.comment_id))
        return ThreadResponse.from_domain(tree)
