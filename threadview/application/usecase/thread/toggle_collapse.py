"""Toggle collapse use case."""

from pydantic import BaseModel

from threadview.domain.service import ThreadService
from threadview.domain.value import CommentId

from .view import ThreadResponse


class ToggleCollapseRequest(BaseModel):
    """Toggle collapse request."""

    comment_id: str


class ToggleCollapseUseCase:
    """Use case for collapsing or expanding the replies of a comment."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize toggle collapse use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: ToggleCollapseRequest) -> ThreadResponse:
        """Execute toggle collapse flow.

        Args:
            request: Toggle collapse request

        Returns:
            Updated thread; every other comment is expanded
        """
        tree = await self.thread_service.toggle_collapse(
            CommentId(request.comment_id)
        )
        return ThreadResponse.from_domain(tree)
