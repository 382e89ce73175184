"""Request-side pagination options.

``PaginationOptions`` is immutable: every instance is normalized on
construction, and ``normalized()`` hands back a fresh, equal copy. Preference
input is lenient and never raises:

- ``limit`` of zero or less becomes the configured default; anything above
  the configured maximum is clamped to it.
- ``direction`` other than exactly ``forward`` becomes ``backward``; matching
  is case-sensitive and whitespace is not trimmed.
- ``sort`` other than ``asc`` becomes ``desc``.
- ``sort_by`` other than ``id``, ``name`` or ``updated`` becomes ``name``.

Structural input (the cursor strings) is only checked when decoded through
``get_cursor()``.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from skyvault.core.pagination.cursor import Cursor, CursorCodec
from skyvault.core.pagination.enums import Direction, SortBy, SortOrder
from skyvault.core.settings import get_pagination_settings


def _coerce_enum[E: StrEnum](enum_cls: type[E], value: Any, default: E) -> E:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            return default
    return default


class PaginationOptions(BaseModel):
    """Normalized pagination request.

    Attributes:
        direction: Traversal direction relative to the anchor.
        limit: Page size, always within ``[1, max_limit]``.
        sort: Logical order of the returned items.
        sort_by: Secondary sort key; identity always breaks ties.
        next_cursor: Anchor consumed by forward traversal.
        prev_cursor: Anchor consumed by backward traversal.

    Example:
        options = PaginationOptions(direction="forward", sort="asc", limit=3)
        cursor = options.get_cursor()  # None on the first page
    """

    model_config = ConfigDict(frozen=True, validate_default=True)

    direction: Direction = Direction.BACKWARD
    limit: int = 0
    sort: SortOrder = SortOrder.DESC
    sort_by: SortBy = SortBy.NAME
    next_cursor: str = Field(default="")
    prev_cursor: str = Field(default="")

    @field_validator("direction", mode="before")
    @classmethod
    def _normalize_direction(cls, v: Any) -> Direction:
        return _coerce_enum(Direction, v, Direction.BACKWARD)

    @field_validator("sort", mode="before")
    @classmethod
    def _normalize_sort(cls, v: Any) -> SortOrder:
        return _coerce_enum(SortOrder, v, SortOrder.DESC)

    @field_validator("sort_by", mode="before")
    @classmethod
    def _normalize_sort_by(cls, v: Any) -> SortBy:
        return _coerce_enum(SortBy, v, SortBy.NAME)

    @field_validator("limit", mode="before")
    @classmethod
    def _default_missing_limit(cls, v: Any) -> Any:
        return 0 if v is None else v

    @field_validator("limit", mode="after")
    @classmethod
    def _clamp_limit(cls, v: int) -> int:
        settings = get_pagination_settings()
        if v <= 0:
            return settings.default_limit
        return min(v, settings.max_limit)

    @field_validator("next_cursor", "prev_cursor", mode="before")
    @classmethod
    def _empty_cursor(cls, v: Any) -> Any:
        return "" if v is None else v

    @property
    def is_forward(self) -> bool:
        return self.direction is Direction.FORWARD

    @property
    def active_cursor(self) -> str:
        """Cursor string consumed by the current direction."""
        return self.next_cursor if self.is_forward else self.prev_cursor

    def normalized(self) -> PaginationOptions:
        """Return a normalized copy.

        Instances built through the constructor are already normalized, so
        this is idempotent; it also repairs instances created with
        ``model_construct`` or ``model_copy(update=...)``.
        """
        return type(self).model_validate(self.model_dump())

    def get_cursor(self, parse_id: Callable[[str], Any] | None = None) -> Cursor | None:
        """Decode the cursor selected by ``direction``.

        Args:
            parse_id: Optional converter for the anchor identity, such as
                ``KeysetColumns.parse_identity``.

        Returns:
            The anchor cursor, or None when the selected string is empty.

        Raises:
            InvalidCursorException: If the selected string is not a valid
                cursor for ``sort_by``.
        """
        return CursorCodec.decode(self.active_cursor, self.sort_by, parse_id=parse_id)

    def encode_cursor(self, cursor: Cursor) -> str:
        """Encode ``cursor`` for this request's sort key."""
        return CursorCodec.encode(cursor, self.sort_by)


__all__ = ["PaginationOptions"]
