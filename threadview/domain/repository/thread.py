"""Thread repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from threadview.domain.model.comment import CommentTree


class ThreadRepository(ABC):
    """Repository holding the current comment thread.

    The thread is replaced wholesale on every change. Implementations must
    apply one transition at a time so that no update is lost.
    """

    @abstractmethod
    async def get_tree(self) -> CommentTree:
        """Get the current thread.

        Returns:
            Immutable snapshot of the root comments
        """
        pass

    @abstractmethod
    async def update(
        self, transition: Callable[[CommentTree], CommentTree]
    ) -> CommentTree:
        """Replace the thread with the result of a transition.

        Args:
            transition: Pure function from the current thread to the next one

        Returns:
            The stored thread after the transition
        """
        pass
