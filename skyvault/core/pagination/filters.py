"""Keyset predicate builder for SQLAlchemy queries.

Instead of OFFSET, each page seeks past the anchor row with a WHERE clause on
the sort key, tie-broken by identity:

    ORDER BY name ASC, id ASC  with anchor (n1, id1), forward:
    WHERE name > n1 OR (name = n1 AND id > id1)

One comparison, picked from a table keyed by (direction, sort), drives the
secondary comparison, the identity tie-break and the physical ORDER BY:

    direction  sort  comparison  physical order
    forward    asc   >           ASC
    forward    desc  <           DESC
    backward   asc   <           DESC
    backward   desc  >           ASC

Backward pages are therefore fetched in reverse and flipped back by the page
assembler.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, and_, or_

from skyvault.core.database.filters import StatementFilter
from skyvault.core.pagination.cursor import Cursor
from skyvault.core.pagination.enums import Direction, SortBy, SortOrder

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement, UnaryExpression
    from sqlalchemy.orm import InstrumentedAttribute

    from skyvault.core.pagination.options import PaginationOptions


class Comparison(StrEnum):
    """Seek comparison applied to every keyset column."""

    GT = ">"
    LT = "<"

    @property
    def ascending(self) -> bool:
        """Whether rows are physically fetched in ascending order."""
        return self is Comparison.GT

    def compare(self, column: Any, value: Any) -> ColumnElement[bool]:
        return column > value if self is Comparison.GT else column < value

    def order(self, column: Any) -> UnaryExpression[Any]:
        return column.asc() if self.ascending else column.desc()


_SEEK_COMPARISONS: dict[tuple[Direction, SortOrder], Comparison] = {
    (Direction.FORWARD, SortOrder.ASC): Comparison.GT,
    (Direction.FORWARD, SortOrder.DESC): Comparison.LT,
    (Direction.BACKWARD, SortOrder.ASC): Comparison.LT,
    (Direction.BACKWARD, SortOrder.DESC): Comparison.GT,
}


def seek_comparison(direction: Direction, sort: SortOrder) -> Comparison:
    """Look up the comparison for a traversal direction and logical sort."""
    return _SEEK_COMPARISONS[(direction, sort)]


@dataclass(frozen=True, slots=True)
class KeysetColumns:
    """Columns a listing can be sorted by.

    Attributes:
        id: Identity column, the universal tie-breaker.
        name: Column used for ``SortBy.NAME``.
        updated: Column used for ``SortBy.UPDATED``.
    """

    id: InstrumentedAttribute[Any]
    name: InstrumentedAttribute[Any] | None = None
    updated: InstrumentedAttribute[Any] | None = None

    @classmethod
    def for_model(cls, model: type[Any]) -> KeysetColumns:
        """Use the conventional ``id``, ``name`` and ``updated_at`` attributes of ``model``."""
        return cls(
            id=model.id,
            name=getattr(model, "name", None),
            updated=getattr(model, "updated_at", None),
        )

    def secondary(self, sort_by: SortBy) -> InstrumentedAttribute[Any] | None:
        """Return the column sorted on before identity, or None for ``SortBy.ID``.

        Raises:
            ValueError: If the listing has no column for ``sort_by``.
        """
        if sort_by is SortBy.ID:
            return None
        column = self.name if sort_by is SortBy.NAME else self.updated
        if column is None:
            msg = f"Listing cannot be sorted by {sort_by.value!r}"
            raise ValueError(msg)
        return column

    def parse_identity(self, raw: str) -> Any:
        """Convert identity text from a cursor to the id column's Python type.

        Raises:
            ValueError: If ``raw`` is not a valid identity for the column.
        """
        try:
            python_type = self.id.type.python_type
        except NotImplementedError:
            return raw
        return python_type(raw)

    def cursor_for(self, item: Any, sort_by: SortBy) -> Cursor:
        """Build the cursor that anchors on ``item`` under ``sort_by``."""
        identity = str(getattr(item, self.id.key))
        secondary = self.secondary(sort_by)
        if secondary is None:
            return Cursor(id=identity)
        value = getattr(item, secondary.key)
        if sort_by is SortBy.NAME:
            return Cursor(id=identity, name=value)
        return Cursor(id=identity, updated=value)


class CursorFilter(StatementFilter):
    """Apply keyset pagination to a SQLAlchemy select.

    Adds the seek condition (only when there is an anchor), the compound
    ORDER BY ending in identity, and a LIMIT of one row past the page size so
    the assembler can tell whether more rows exist.

    Example:
        options = PaginationOptions(direction="forward", sort="asc", sort_by="name", limit=3)
        stmt = select(FileInfo).where(FileInfo.owner_id == owner_id)
        stmt = CursorFilter.from_options(options, KeysetColumns.for_model(FileInfo)).apply(stmt)
    """

    def __init__(
        self,
        options: PaginationOptions,
        columns: KeysetColumns,
        cursor: Cursor | None = None,
    ) -> None:
        """Initialize cursor filter.

        Args:
            options: Normalized pagination options.
            columns: Sortable columns of the listing.
            cursor: Decoded anchor, or None to start at the edge of the sequence.

        Raises:
            ValueError: If the listing cannot be sorted by ``options.sort_by``.
        """
        self.options = options
        self.columns = columns
        self.cursor = cursor
        self.comparison = seek_comparison(options.direction, options.sort)
        self.secondary = columns.secondary(options.sort_by)

        self._anchor_secondary: Any = None
        if cursor is not None and self.secondary is not None:
            self._anchor_secondary = cursor.name if options.sort_by is SortBy.NAME else cursor.updated

    @classmethod
    def from_options(cls, options: PaginationOptions, columns: KeysetColumns) -> CursorFilter:
        """Decode the request's active cursor and build the filter for it."""
        return cls(options, columns, options.get_cursor(parse_id=columns.parse_identity))

    def order_by_clauses(self) -> list[UnaryExpression[Any]]:
        """ORDER BY terms in physical fetch order, always ending in identity."""
        keys = [self.columns.id] if self.secondary is None else [self.secondary, self.columns.id]
        return [self.comparison.order(column) for column in keys]

    def where_clause(self) -> ColumnElement[bool] | None:
        """Seek condition past the anchor, or None when there is no anchor."""
        if self.cursor is None:
            return None

        past_id = self.comparison.compare(self.columns.id, self.cursor.id)
        if self.secondary is None:
            return past_id
        return or_(
            self.comparison.compare(self.secondary, self._anchor_secondary),
            and_(self.secondary == self._anchor_secondary, past_id),
        )

    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply seek condition, ordering and the over-fetch LIMIT."""
        condition = self.where_clause()
        if condition is not None:
            statement = statement.where(condition)
        return statement.order_by(*self.order_by_clauses()).limit(self.options.limit + 1)


__all__ = ["Comparison", "CursorFilter", "KeysetColumns", "seek_comparison"]
