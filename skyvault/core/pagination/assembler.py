"""Page assembly for keyset-paginated fetches.

Turns the ``limit + 1`` rows returned by a query built with ``CursorFilter``
into a ``Page``: detects overflow, trims the row furthest from the anchor,
restores logical order for backward traversal and mints the boundary cursors.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from skyvault.core.pagination.schemas import Page

if TYPE_CHECKING:
    from skyvault.core.pagination.cursor import Cursor
    from skyvault.core.pagination.options import PaginationOptions


def assemble_page[T](
    rows: Sequence[T],
    options: PaginationOptions,
    *,
    cursor_for: Callable[[T], Cursor],
) -> Page[T]:
    """Build a page from rows fetched in physical order.

    Args:
        rows: Rows as returned by the store, at most ``options.limit + 1``.
        options: The options the query was built from.
        cursor_for: Builds the anchor cursor for a row under ``options.sort_by``.

    Returns:
        Page whose items follow the requested sort order.

    Example:
        columns = KeysetColumns.for_model(FileInfo)
        page = assemble_page(
            rows,
            options,
            cursor_for=lambda row: columns.cursor_for(row, options.sort_by),
        )
    """
    has_more = len(rows) > options.limit
    # Physical order runs away from the anchor, so the overflow row is last.
    items = list(rows[: options.limit])
    if not options.is_forward:
        items.reverse()

    if not items:
        return Page[T](items=[])

    return Page[T](
        items=items,
        prev_cursor=options.encode_cursor(cursor_for(items[0])),
        next_cursor=options.encode_cursor(cursor_for(items[-1])),
        has_more=has_more,
    )


__all__ = ["assemble_page"]
