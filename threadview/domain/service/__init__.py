"""Domain services."""

from .base import Service
from .comment_tree import (
    collect_ids,
    count_nodes,
    find_node,
    insert_reply,
    iter_nodes,
    toggle_collapse,
    toggle_reply,
)
from .id_generator import IdGenerator, UuidIdGenerator
from .thread_service import ThreadService

__all__ = [
    "IdGenerator",
    "Service",
    "ThreadService",
    "UuidIdGenerator",
    "collect_ids",
    "count_nodes",
    "find_node",
    "insert_reply",
    "iter_nodes",
    "toggle_collapse",
    "toggle_reply",
]
