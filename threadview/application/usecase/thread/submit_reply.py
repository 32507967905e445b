"""Submit reply use case."""

from pydantic import BaseModel

from threadview.domain.service import ThreadService
from threadview.domain.value import CommentId

from .view import ThreadResponse


class SubmitReplyRequest(BaseModel):
    """Submit reply request."""

    comment_id: str  # Comment being replied to
    text: str


class SubmitReplyResponse(ThreadResponse):
    """Submit reply response."""

    reply_id: str | None  # None when nothing was added


class SubmitReplyUseCase:
    """Use case for adding a reply under a comment."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize submit reply use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: SubmitReplyRequest) -> SubmitReplyResponse:
        """Execute submit reply flow.

        Steps:
        1. Skip empty text (the thread is returned unchanged)
        2. Append the reply under the target comment
        3. Close the reply box

        Args:
            request: Submit reply request

        Returns:
            Updated thread and the ID of the new reply
        """
        tree, reply_id = await self.thread_service.submit_reply(
            CommentId(request.comment_id), request.text
        )
        thread = ThreadResponse.from_domain(tree)
        return SubmitReplyResponse(
            comments=thread.comments,
            total=thread.total,
            reply_id=reply_id,
        )
