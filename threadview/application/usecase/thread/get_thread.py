"""Get thread use case."""

from threadview.domain.service import ThreadService

from .view import ThreadResponse


class GetThreadUseCase:
    """Use case for reading the whole comment thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self) -> ThreadResponse:
        """Execute get thread flow.

        Returns:
            Thread with every comment, collapsed replies hidden
        """
        tree = await self.thread_service.get_tree()
        return ThreadResponse.from_domain(tree)
