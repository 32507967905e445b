"""In-memory repository implementations."""

from .thread import InMemoryThreadRepository

__all__ = [
    "InMemoryThreadRepository",
]
