"""Test configuration and fixtures."""

import logfire

from threadview.domain.model.comment import CommentNode
from threadview.domain.service import IdGenerator
from threadview.domain.value import CommentId

# Keep spans local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)


def make_comment(
    comment_id: str,
    text: str | None = None,
    *children: CommentNode,
    can_reply: bool = True,
    is_reply_box_open: bool = False,
    is_collapsed: bool = False,
) -> CommentNode:
    """Helper function to build test comments.

    Args:
        comment_id: Comment ID
        text: Comment text (defaults to "Comment <id>")
        *children: Replies in display order
        can_reply: Whether the comment accepts replies
        is_reply_box_open: Reply box state
        is_collapsed: Collapse state

    Returns:
        Comment node
    """
    return CommentNode(
        id=CommentId(comment_id),
        text=text or f"Comment {comment_id}",
        can_reply=can_reply,
        is_reply_box_open=is_reply_box_open,
        is_collapsed=is_collapsed,
        children=children,
    )


class SequentialIdGenerator(IdGenerator):
    """Deterministic ID source: reply-1, reply-2, ..."""

    def __init__(self, prefix: str = "reply") -> None:
        self.prefix = prefix
        self.count = 0

    def generate(self) -> CommentId:
        self.count += 1
        return CommentId(f"{self.prefix}-{self.count}")
