"""Domain model entities for threadview."""

from threadview.domain.model.comment import CommentNode, CommentTree

__all__ = [
    "CommentNode",
    "CommentTree",
]
