"""Configuration for the linked list.

Defines the tunable behaviour of SinglyLinkedList.
"""

from __future__ import annotations

from dataclasses import dataclass

KTH_STRATEGIES = ("runner", "length")


@dataclass
class LinkedListConfig:
    """Configuration parameters for SinglyLinkedList.

    Attributes:
        kth_strategy: How kth_from_end walks the list. "runner" uses two
            pointers k nodes apart; "length" walks len - 1 - k nodes from
            the head using the tracked size.
        strict_equality: Whether booleans are kept apart from numbers when
            comparing values (so True does not match 1). Other values
            compare with ==, so 1 matches 1.0
    """

    kth_strategy: str = "runner"
    strict_equality: bool = True

    def __post_init__(self) -> None:
        if self.kth_strategy not in KTH_STRATEGIES:
            raise ValueError(
                f"Unknown kth_strategy {self.kth_strategy!r}, "
                f"expected one of {KTH_STRATEGIES}"
            )
