"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class EmptyReplyTextError(ValidationError):
    """Raised when a reply is inserted without any text."""

    def __init__(self, comment_id: str):
        self.comment_id = comment_id
        super().__init__(f"Reply to comment {comment_id} has empty text")


class DuplicateCommentIdError(ValidationError):
    """Raised when a thread contains the same comment ID more than once."""

    def __init__(self, comment_ids: list[str]):
        self.comment_ids = comment_ids
        super().__init__(f"Duplicate comment IDs in thread: {', '.join(comment_ids)}")
