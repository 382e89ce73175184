"""Cursor-based keyset pagination.

Every listing (files, folders, contacts, contact groups, group members) is
paginated through this package:

    options (request)  ->  CursorCodec.decode  ->  CursorFilter  ->  store
                                                                   |
    Page[T] (response) <-       assemble_page        <-  limit + 1 rows

Usage:
    options = PaginationOptions(direction="forward", sort="asc", sort_by="name", limit=3)
    columns = KeysetColumns.for_model(FileInfo)
    stmt = CursorFilter.from_options(options, columns).apply(select(FileInfo))
    rows = (await session.execute(stmt)).scalars().all()
    page = assemble_page(rows, options, cursor_for=lambda r: columns.cursor_for(r, options.sort_by))

Cursors are opaque URL-safe strings that clients pass back unchanged.
"""

from skyvault.core.pagination.assembler import assemble_page
from skyvault.core.pagination.cursor import Cursor, CursorCodec
from skyvault.core.pagination.enums import Direction, SortBy, SortOrder
from skyvault.core.pagination.filters import (
    Comparison,
    CursorFilter,
    KeysetColumns,
    seek_comparison,
)
from skyvault.core.pagination.options import PaginationOptions
from skyvault.core.pagination.schemas import Page

__all__ = [
    "Comparison",
    "Cursor",
    "CursorCodec",
    "CursorFilter",
    "Direction",
    "KeysetColumns",
    "Page",
    "PaginationOptions",
    "SortBy",
    "SortOrder",
    "assemble_page",
    "seek_comparison",
]
