"""Data structures - a singly linked list with head and tail tracking."""

from .config import LinkedListConfig
from .errors import (
    LinkedListError,
    NotFoundError,
    InvalidArgumentError,
)
from .linkedlist import Node, SinglyLinkedList
from .types import SearchResult

__all__ = [
    "LinkedListConfig",
    "LinkedListError",
    "NotFoundError",
    "InvalidArgumentError",
    "Node",
    "SinglyLinkedList",
    "SearchResult",
]
