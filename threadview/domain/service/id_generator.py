"""Comment ID generation."""

from threadview.domain.value import CommentId, new_comment_id


class IdGenerator:
    """Source of fresh comment IDs.

    Implementations must never return the same ID twice within a process.
    """

    def generate(self) -> CommentId:
        """Return a new, unused comment ID."""
        raise NotImplementedError


class UuidIdGenerator(IdGenerator):
    """ID generator backed by random UUID4 strings."""

    def generate(self) -> CommentId:
        return new_comment_id()
