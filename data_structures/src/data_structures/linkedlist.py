"""
A singly linked list with head and tail tracking.

Time Complexity:
Insert at head / append at tail: O(1)
Search, insert before/after a value, kth from end, middle: O(n)
Length: O(1), the size is tracked on every mutation
"""

from __future__ import annotations  # allows forward-referencing without quotes

import logging
import operator
from typing import Any, Generic, Iterator, List, Optional, Tuple, TypeVar

from .config import LinkedListConfig
from .errors import InvalidArgumentError, NotFoundError
from .types import SearchResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Distinguishes "no argument" from an explicit None
_MISSING: Any = object()


class Node(Generic[T]):
    """
    A node is a container which holds a value of type T
    and the next node it is linked to.
    """

    def __init__(self, value: T, next: Optional[Node[T]] = None) -> None:
        self.value: T = value
        self.next: Optional[Node[T]] = next

    def __repr__(self) -> str:
        if self.next is None:
            return f"Node(value={self.value!r}, next=<end>)"
        return f"Node(value={self.value!r}, next={self.next.value!r})"


class SinglyLinkedList(Generic[T]):
    """
    SinglyLinkedList keeps a forward chain of Node containers,
    with references to both ends so that insert and append are O(1).

    Invariants:
        - Empty list: head and tail are both None
        - One node: head is tail
        - Otherwise tail is reached from head in len - 1 steps
          and tail.next is None
    """

    def __init__(self, value: T = _MISSING, *, config: Optional[LinkedListConfig] = None) -> None:
        self.config = config if config is not None else LinkedListConfig()
        self.head: Optional[Node[T]] = None
        self.tail: Optional[Node[T]] = None
        self._size: int = 0

        if value is not _MISSING:
            self.append(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        current = self.head
        while current is not None:
            yield current.value
            current = current.next

    def __contains__(self, value: object) -> bool:
        return self._find(value)[1] is not None

    def __repr__(self) -> str:
        values = " -> ".join(repr(v) for v in self)
        if not values:
            return "[Head] [Tail]"
        return f"[Head] {values} [Tail]"

    def is_empty(self) -> bool:
        return self.head is None

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _matches(self, node_value: Any, value: Any) -> bool:
        # bool is an int subclass, but True must not match 1
        if self.config.strict_equality and isinstance(node_value, bool) != isinstance(value, bool):
            return False
        return node_value == value

    def _find(self, value: Any) -> Tuple[Optional[Node[T]], Optional[Node[T]]]:
        """
        Returns (predecessor, node) for the first node holding value.
        The predecessor is None when the match is the head.
        Returns (None, None) when there is no match.
        """
        prior: Optional[Node[T]] = None
        current = self.head
        while current is not None:
            if self._matches(current.value, value):
                return prior, current
            prior = current
            current = current.next
        return None, None

    def _middle(self) -> Tuple[int, Node[T]]:
        """
        Walks a slow and a fast pointer until the fast one cannot
        take two more steps. For even lengths this stops on the
        earlier of the two middle nodes.
        """
        if self.head is None:
            logger.debug("Middle requested on an empty list")
            raise NotFoundError("Cannot find the middle of an empty list")

        idx = 0
        slow = fast = self.head
        while fast.next is not None and fast.next.next is not None:
            slow = slow.next
            fast = fast.next.next
            idx += 1
        return idx, slow

    @staticmethod
    def _as_index(k: Any) -> int:
        # bool is an int subclass but never a meaningful position
        if isinstance(k, bool):
            raise InvalidArgumentError(f"k must be an integer, got {k!r}")
        if isinstance(k, float):
            if k.is_integer():
                return int(k)
            raise InvalidArgumentError(f"k must be an integer, got {k!r}")
        try:
            return operator.index(k)
        except TypeError:
            raise InvalidArgumentError(f"k must be an integer, got {k!r}") from None

    # -----------------------------
    # Mutations
    # -----------------------------
    def insert(self, value: T) -> None:
        """
        Inserts a new node at the head of the list.
        O(1) since no scanning is involved.
        """
        new_node = Node(value, next=self.head)
        self.head = new_node
        if self.tail is None:
            self.tail = new_node
        self._size += 1
        logger.debug(f"Inserted {value!r} at head")

    def append(self, value: T) -> None:
        """
        Appends a new node at the tail of the list.
        O(1) thanks to the tail reference.
        """
        new_node = Node(value)
        if self.tail is None:
            self.head = new_node
        else:
            self.tail.next = new_node
        self.tail = new_node
        self._size += 1
        logger.debug(f"Appended {value!r} at tail")

    def insert_before(self, target: T, value: T) -> None:
        """
        Inserts value immediately before the first node holding target.
        Raises NotFoundError if the list is empty or target is absent;
        the list is left unchanged in that case.
        """
        prior, found = self._find(target)
        if found is None:
            logger.debug(f"insert_before: {target!r} not in list")
            raise NotFoundError(f"Cannot insert before {target!r}: list empty or value absent")

        new_node = Node(value, next=found)
        if prior is None:
            self.head = new_node
        else:
            prior.next = new_node
        self._size += 1
        logger.debug(f"Inserted {value!r} before {target!r}")

    def insert_after(self, target: T, value: T) -> None:
        """
        Inserts value immediately after the first node holding target.
        Raises NotFoundError if the list is empty or target is absent;
        the list is left unchanged in that case.
        """
        _, found = self._find(target)
        if found is None:
            logger.debug(f"insert_after: {target!r} not in list")
            raise NotFoundError(f"Cannot insert after {target!r}: list empty or value absent")

        new_node = Node(value, next=found.next)
        found.next = new_node
        if found is self.tail:
            self.tail = new_node
        self._size += 1
        logger.debug(f"Inserted {value!r} after {target!r}")

    # -----------------------------
    # Queries
    # -----------------------------
    def search(self, value: T = _MISSING) -> SearchResult:
        """
        Scans the list from the head for value.
        O(n), since in the worst case it must scan the entire list.
        """
        if value is _MISSING:
            return SearchResult.NO_QUERY
        if self._find(value)[1] is None:
            return SearchResult.NOT_FOUND
        return SearchResult.FOUND

    def includes(self, value: T = _MISSING) -> Optional[bool]:
        """
        Returns True if value is in the list, False if not
        (an empty list included), and None if called without a value.
        """
        return self.search(value).as_optional_bool()

    def print(self) -> List[T]:
        """Returns the values from head to tail as a list."""
        return list(iter(self))

    def kth_from_end(self, k: Any) -> T:
        """
        Returns the value k positions before the tail:
        k=0 is the tail, k=len-1 is the head.

        Raises InvalidArgumentError if k is not integer-valued,
        and NotFoundError if k is negative or not less than the length.
        """
        k = self._as_index(k)
        if k < 0 or k >= self._size:
            logger.debug(f"kth_from_end: {k} out of range for length {self._size}")
            raise NotFoundError(f"k={k} is out of range for a list of length {self._size}")

        if self.config.kth_strategy == "length":
            current = self.head
            for _ in range(self._size - 1 - k):
                current = current.next
            return current.value

        # Runner: lead starts k nodes ahead, so trail stops k before the tail
        lead = self.head
        for _ in range(k):
            lead = lead.next
        trail = self.head
        while lead.next is not None:
            lead = lead.next
            trail = trail.next
        return trail.value

    def find_middle_idx(self) -> int:
        """
        Returns the zero-based index of the middle node.
        Odd length n: (n - 1) / 2. Even length n: n / 2 - 1.
        """
        return self._middle()[0]

    def find_middle_value(self) -> T:
        """Returns the value at find_middle_idx()."""
        return self._middle()[1].value
