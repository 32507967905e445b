"""In-memory thread repository."""

import asyncio
from collections import Counter
from collections.abc import Callable

from threadview.domain.error import DuplicateCommentIdError
from threadview.domain.model.comment import CommentTree
from threadview.domain.repository.thread import ThreadRepository
from threadview.domain.service.comment_tree import collect_ids


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository.

    Holds the thread for the lifetime of the process. Updates are serialized
    with a lock; readers always get an immutable snapshot.
    """

    def __init__(self, seed: CommentTree = ()) -> None:
        duplicates = [
            comment_id
            for comment_id, count in Counter(collect_ids(seed)).items()
            if count > 1
        ]
        if duplicates:
            raise DuplicateCommentIdError(duplicates)
        self._tree: CommentTree = tuple(seed)
        self._lock = asyncio.Lock()

    async def get_tree(self) -> CommentTree:
        """Get the current thread."""
        return self._tree

    async def update(
        self, transition: Callable[[CommentTree], CommentTree]
    ) -> CommentTree:
        """Apply a transition and store the result."""
        async with self._lock:
            self._tree = transition(self._tree)
            return self._tree
