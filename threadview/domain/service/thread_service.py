"""Thread domain service."""

import logfire

from threadview.domain.model.comment import CommentTree
from threadview.domain.repository import ThreadRepository
from threadview.domain.value import CommentId

from .base import Service
from .comment_tree import (
    count_nodes,
    find_node,
    insert_reply,
    toggle_collapse,
    toggle_reply,
)
from .id_generator import IdGenerator


class ThreadService(Service):
    """Domain service applying user actions to the stored thread."""

    def __init__(
        self, thread_repository: ThreadRepository, id_generator: IdGenerator
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            id_generator: Source of IDs for new replies
        """
        self.thread_repository = thread_repository
        self.id_generator = id_generator

    async def get_tree(self) -> CommentTree:
        """Get the current thread.

        Returns:
            Root comments in display order
        """
        with logfire.span("thread_service.get_tree"):
            tree = await self.thread_repository.get_tree()
            logfire.info("Thread retrieved", count=count_nodes(tree))
            return tree

    async def toggle_reply(self, comment_id: CommentId) -> CommentTree:
        """Open or close the reply box of a comment.

        Args:
            comment_id: Comment ID

        Returns:
            Updated thread
        """
        with logfire.span("thread_service.toggle_reply", comment_id=comment_id):
            tree = await self.thread_repository.update(
                lambda current: toggle_reply(current, comment_id)
            )
            self._log_outcome(tree, comment_id, "Reply box toggled")
            return tree

    async def cancel_reply(self, comment_id: CommentId) -> CommentTree:
        """Cancel a reply in progress.

        Cancelling toggles the reply box again, which closes it while open.

        Args:
            comment_id: Comment ID

        Returns:
            Updated thread
        """
        with logfire.span("thread_service.cancel_reply", comment_id=comment_id):
            tree = await self.thread_repository.update(
                lambda current: toggle_reply(current, comment_id)
            )
            self._log_outcome(tree, comment_id, "Reply cancelled")
            return tree

    async def toggle_collapse(self, comment_id: CommentId) -> CommentTree:
        """Collapse or expand the replies of a comment.

        Args:
            comment_id: Comment ID

        Returns:
            Updated thread
        """
        with logfire.span("thread_service.toggle_collapse", comment_id=comment_id):
            tree = await self.thread_repository.update(
                lambda current: toggle_collapse(current, comment_id)
            )
            self._log_outcome(tree, comment_id, "Replies collapse toggled")
            return tree

    async def submit_reply(
        self, comment_id: CommentId, text: str
    ) -> tuple[CommentTree, CommentId | None]:
        """Add a reply under a comment.

        Empty text is ignored and the thread is left untouched.

        Args:
            comment_id: Comment being replied to
            text: Reply text

        Returns:
            Tuple of (updated thread, new reply ID). The reply ID is None when
            nothing was added.
        """
        with logfire.span(
            "thread_service.submit_reply",
            comment_id=comment_id,
            text_length=len(text),
        ):
            if not text:
                logfire.info("Empty reply ignored", comment_id=comment_id)
                return await self.thread_repository.get_tree(), None

            generated: list[CommentId] = []

            def generate_id() -> CommentId:
                reply_id = self.id_generator.generate()
                generated.append(reply_id)
                return reply_id

            tree = await self.thread_repository.update(
                lambda current: insert_reply(current, comment_id, text, generate_id)
            )
            reply_id = generated[0] if generated else None
            if reply_id is None:
                logfire.warn("Reply target not found", comment_id=comment_id)
            else:
                logfire.info(
                    "Reply added",
                    comment_id=comment_id,
                    reply_id=reply_id,
                    count=count_nodes(tree),
                )
            return tree, reply_id

    @staticmethod
    def _log_outcome(tree: CommentTree, comment_id: CommentId, message: str) -> None:
        node = find_node(tree, comment_id)
        if node is None:
            logfire.warn("Comment not found in thread", comment_id=comment_id)
            return
        logfire.info(
            message,
            comment_id=comment_id,
            is_reply_box_open=node.is_reply_box_open,
            is_collapsed=node.is_collapsed,
        )
