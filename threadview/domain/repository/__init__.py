"""Repository interfaces for threadview domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from threadview.domain.repository.thread import ThreadRepository

__all__ = [
    "ThreadRepository",
]
