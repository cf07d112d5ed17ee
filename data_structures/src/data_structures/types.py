"""Common type definitions for the linked list."""

from __future__ import annotations

from enum import Enum


class SearchResult(Enum):
    """Outcome of a linear search.

    FOUND is truthy; NOT_FOUND and NO_QUERY are falsy. NO_QUERY means the
    search was called without a value, which is not the same as a miss.
    """

    FOUND = "found"
    NOT_FOUND = "not_found"
    NO_QUERY = "no_query"

    def __bool__(self) -> bool:
        return self is SearchResult.FOUND

    def as_optional_bool(self) -> bool | None:
        """Return True/False for a search, or None when nothing was queried."""
        if self is SearchResult.NO_QUERY:
            return None
        return self is SearchResult.FOUND
