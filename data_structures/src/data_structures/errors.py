"""Exception hierarchy for the linked list.

NotFoundError and InvalidArgumentError also derive from the builtin
LookupError and TypeError, so callers can catch either.
"""

from __future__ import annotations


class LinkedListError(Exception):
    """Base exception for all linked list errors."""
    pass


class NotFoundError(LinkedListError, LookupError):
    """Raised when an anchor value or position does not exist in the list."""
    pass


class InvalidArgumentError(LinkedListError, TypeError):
    """Raised when an argument has the wrong type, e.g. a non-integer index."""
    pass
