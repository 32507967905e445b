"""Repository implementations."""

from .inmemory import InMemoryThreadRepository

__all__ = [
    "InMemoryThreadRepository",
]
