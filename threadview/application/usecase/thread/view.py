"""Thread view models shared by the thread use cases."""

from pydantic import BaseModel

from threadview.domain.model.comment import CommentNode, CommentTree
from threadview.domain.service import count_nodes


class CommentView(BaseModel):
    """Comment as a renderer should draw it.

    Recursive structure mirroring the domain model, with the affordances
    already decided: which buttons show, and whether replies are visible.
    """

    comment_id: str
    text: str
    can_reply: bool
    is_reply_box_open: bool
    is_collapsed: bool
    reply_count: int
    show_reply_button: bool
    show_collapse_button: bool
    collapse_label: str
    replies: list["CommentView"]

    @classmethod
    def from_domain(cls, node: CommentNode) -> "CommentView":
        """Convert a domain comment node to its view.

        Replies of a collapsed comment are left out; reply_count still
        reports them.

        Args:
            node: Domain comment node

        Returns:
            View model with replies recursively converted
        """
        show_reply_button = node.can_reply and not node.is_reply_box_open
        return cls(
            comment_id=node.id,
            text=node.text,
            can_reply=node.can_reply,
            is_reply_box_open=node.is_reply_box_open,
            is_collapsed=node.is_collapsed,
            reply_count=len(node.children),
            show_reply_button=show_reply_button,
            show_collapse_button=show_reply_button and len(node.children) > 0,
            collapse_label="Expand" if node.is_collapsed else "Collapse",
            replies=(
                []
                if node.is_collapsed
                else [cls.from_domain(child) for child in node.children]
            ),
        )


class ThreadResponse(BaseModel):
    """Thread response."""

    comments: list[CommentView]
    total: int

    @classmethod
    def from_domain(cls, tree: CommentTree) -> "ThreadResponse":
        """Convert a domain thread to its response model."""
        return cls(
            comments=[CommentView.from_domain(node) for node in tree],
            total=count_nodes(tree),
        )
