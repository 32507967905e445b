"""Initial thread contents loaded at process start."""

from threadview.domain.model.comment import CommentNode, CommentTree
from threadview.domain.value import CommentId

INITIAL_THREAD: CommentTree = (
    CommentNode(
        id=CommentId("1"),
        text="Hello",
        can_reply=True,
        is_reply_box_open=False,
        is_collapsed=False,
        children=(),
    ),
)
