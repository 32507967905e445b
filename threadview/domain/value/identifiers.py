"""Strongly typed identifiers for thread entities.

Comment ids are opaque strings: seeded comments use short literals ("1"),
replies get UUID4 strings.
"""

from typing import NewType
from uuid import uuid4

CommentId = NewType("CommentId", str)


def new_comment_id() -> CommentId:
    """Generate a fresh, globally unique comment ID."""
    return CommentId(str(uuid4()))
