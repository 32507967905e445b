"""Comment node entity.

A thread is a forest of comment nodes. Each node owns its replies directly,
so a whole thread is one immutable value that is rebuilt, never edited.
"""

from pydantic import Field

from threadview.domain.model.common import DomainModel
from threadview.domain.value import CommentId


class CommentNode(DomainModel):
    """Comment entity with nested replies.

    Transient UI state lives on the node itself:
    - is_reply_box_open: true for at most one node in the whole thread
    - is_collapsed: hides this node's own replies only
    """

    id: CommentId
    text: str = Field(min_length=1, max_length=10000)
    can_reply: bool = True
    is_reply_box_open: bool = False
    is_collapsed: bool = False
    children: tuple["CommentNode", ...] = ()

    @property
    def is_leaf(self) -> bool:
        """Whether this comment has no replies."""
        return not self.children


# Root sequence of a thread, in display order
CommentTree = tuple[CommentNode, ...]
