"""Page schema returned by every keyset-paginated listing.

Serialized as ``{items, prevCursor, nextCursor, hasMore}``. ``items`` is
always in the order the client asked for, whichever way the rows were
physically fetched.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class Page(BaseModel, Generic[T]):
    """One page of a keyset-paginated listing.

    Usage:
        @router.get("/files", response_model=Page[FileInfoResponse])
        async def list_files(...) -> Page[FileInfoResponse]:
            page = await repo.list_in_folder(session, owner_id, folder_id, options=options)
            return page.to_schema(FileInfoResponse)

    Client navigation:
        # First page
        GET /files?direction=forward&sort=asc&sort-by=name&limit=3

        # Next page
        GET /files?direction=forward&sort=asc&sort-by=name&limit=3&next-cursor=<nextCursor>

        # Previous page
        GET /files?direction=backward&sort=asc&sort-by=name&limit=3&prev-cursor=<prevCursor>

    Attributes:
        items: Items in the requested logical order.
        prev_cursor: Anchor on the first item, for backward traversal.
        next_cursor: Anchor on the last item, for forward traversal.
        has_more: Whether the store held more rows past this page in the
            traversal direction.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: list[T] = Field(default_factory=list, description="Items of this page")
    prev_cursor: str = Field(default="", description="Cursor anchoring the previous page")
    next_cursor: str = Field(default="", description="Cursor anchoring the next page")
    has_more: bool = Field(default=False, description="Whether more items exist in this direction")

    @model_validator(mode="after")
    def _empty_page_has_no_cursors(self) -> Page[T]:
        # A cursor pointing at nothing must never be handed to a client.
        if not self.items:
            self.prev_cursor = ""
            self.next_cursor = ""
            self.has_more = False
        return self

    def to_schema(self, schema: type[M]) -> Page[M]:
        """Convert every item with ``schema.model_validate``, keeping the cursors.

        Example:
            page.to_schema(FileInfoResponse)  # Page[FileInfo] -> Page[FileInfoResponse]
        """
        return Page[schema](
            items=[schema.model_validate(item) for item in self.items],
            prev_cursor=self.prev_cursor,
            next_cursor=self.next_cursor,
            has_more=self.has_more,
        )


__all__ = ["Page"]
