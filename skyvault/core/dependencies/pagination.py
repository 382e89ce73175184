"""Keyset pagination dependencies for FastAPI routes.

Listings read their paging preferences from the query string:

    ?limit=3&direction=forward&sort=asc&sort-by=name&next-cursor=...

A listing that returns several independently paged collections reads each
one under its own prefix, e.g. ``file-limit`` and ``folder-limit``.

Unrecognized preference values are normalized by ``PaginationOptions``
rather than rejected; only a non-integer ``limit`` fails request validation.

Usage:
    from skyvault.core.dependencies.pagination import PagingOptions

    @router.get("/contacts")
    async def list_contacts(options: PagingOptions) -> Page[ContactResponse]:
        ...
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Query

from skyvault.core.pagination.options import PaginationOptions


def paging_options(prefix: str = "") -> Callable[..., PaginationOptions]:
    """Build a dependency that reads pagination options from query parameters.

    Args:
        prefix: Prepended to every parameter name (``"file-"`` reads
            ``file-limit``, ``file-next-cursor``, ...).

    Returns:
        FastAPI dependency producing normalized PaginationOptions.
    """

    def dependency(
        limit: int | None = Query(
            default=None,
            alias=f"{prefix}limit",
            description="Page size; values <= 0 use the default, large values are clamped",
        ),
        direction: str | None = Query(
            default=None,
            alias=f"{prefix}direction",
            description="forward or backward (anything else means backward)",
        ),
        sort: str | None = Query(
            default=None,
            alias=f"{prefix}sort",
            description="asc or desc (anything else means desc)",
        ),
        sort_by: str | None = Query(
            default=None,
            alias=f"{prefix}sort-by",
            description="id, name or updated (anything else means name)",
        ),
        next_cursor: str | None = Query(
            default=None,
            alias=f"{prefix}next-cursor",
            description="Cursor returned as nextCursor, used when direction=forward",
        ),
        prev_cursor: str | None = Query(
            default=None,
            alias=f"{prefix}prev-cursor",
            description="Cursor returned as prevCursor, used when direction=backward",
        ),
    ) -> PaginationOptions:
        return PaginationOptions(
            limit=limit,
            direction=direction,
            sort=sort,
            sort_by=sort_by,
            next_cursor=next_cursor,
            prev_cursor=prev_cursor,
        )

    dependency.__name__ = f"{prefix.replace('-', '_')}paging_options"
    return dependency


PagingOptions = Annotated[PaginationOptions, Depends(paging_options())]
FilePagingOptions = Annotated[PaginationOptions, Depends(paging_options("file-"))]
FolderPagingOptions = Annotated[PaginationOptions, Depends(paging_options("folder-"))]


__all__ = [
    "FilePagingOptions",
    "FolderPagingOptions",
    "PagingOptions",
    "paging_options",
]
