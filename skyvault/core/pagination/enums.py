"""Enumerations shared by the pagination engine."""

from __future__ import annotations

from enum import StrEnum


class Direction(StrEnum):
    """Traversal direction relative to the anchor cursor."""

    FORWARD = "forward"
    BACKWARD = "backward"


class SortOrder(StrEnum):
    """Logical sort order requested by the client."""

    ASC = "asc"
    DESC = "desc"


class SortBy(StrEnum):
    """Sort key. Identity is always appended as the tie-breaker."""

    ID = "id"
    NAME = "name"
    UPDATED = "updated"

    @property
    def cursor_fields(self) -> int:
        """Number of values a cursor minted for this key carries."""
        return 1 if self is SortBy.ID else 2


__all__ = ["Direction", "SortBy", "SortOrder"]
