"""Domain value objects for threadview."""

from threadview.domain.value.identifiers import CommentId, new_comment_id

__all__ = [
    "CommentId",
    "new_comment_id",
]
