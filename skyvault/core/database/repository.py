"""Minimal generic repository for SQLAlchemy models.

Provides basic lookups, creation and keyset pagination with explicit session
passing. For queries not covered here, build the statement directly and hand
it to ``paginate_cursor``.

Example:
    class FileInfoRepository(BaseRepository[FileInfo]):
        async def list_for_folder(self, session, owner_id, folder_id, *, options):
            stmt = select(FileInfo).where(FileInfo.owner_id == owner_id)
            return await self.paginate_cursor(session, stmt, options=options)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, select

from skyvault.core.database.exceptions import NotFoundError
from skyvault.core.pagination.assembler import assemble_page
from skyvault.core.pagination.filters import CursorFilter, KeysetColumns
from skyvault.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from skyvault.core.pagination.options import PaginationOptions
    from skyvault.core.pagination.schemas import Page


class BaseRepository[T]:
    """Minimal generic repository.

    Provides:
        - get(session, id) -> T | None
        - get_or_raise(session, id) -> T (raises NotFoundError)
        - create(session, instance) -> T
        - paginate_cursor(session, statement, options=...) -> Page[T]

    Session is always explicit - no hidden state.
    """

    __slots__ = ("model", "_logger", "_lazy")

    def __init__(self, model: type[T]) -> None:
        self.model = model
        # Standard logger for INFO/WARNING/ERROR
        self._logger = logging.getLogger(f"repository.{model.__name__}")
        # Lazy logger for DEBUG (zero overhead when DEBUG disabled)
        self._lazy = get_lazy_logger(f"repository.{model.__name__}")

    async def get(self, session: AsyncSession, id: Any) -> T | None:  # noqa: A002
        """Get entity by primary key, or None."""
        instance = await session.get(self.model, id)
        self._lazy.debug(
            lambda: f"db.get: {self.model.__name__}({id}) -> {'found' if instance else 'not found'}"
        )
        return instance

    async def get_or_raise(
        self,
        session: AsyncSession,
        id: Any,  # noqa: A002
        *,
        owner_id: Any = None,
    ) -> T:
        """Get entity by primary key or raise NotFoundError.

        Args:
            session: Database session
            id: Primary key value
            owner_id: When given, rows owned by anyone else count as missing

        Raises:
            NotFoundError: If entity doesn't exist or belongs to another owner
        """
        instance = await self.get(session, id)
        if instance is not None and owner_id is not None and getattr(instance, "owner_id", None) != owner_id:
            instance = None
        if instance is None:
            self._logger.info(
                "Entity not found",
                extra={
                    "entity": self.model.__name__,
                    "id": str(id),
                    "operation": "db.get_or_raise",
                },
            )
            raise NotFoundError(self.model.__name__, {"id": id})
        return instance

    async def create(self, session: AsyncSession, instance: T) -> T:
        """Persist a new entity.

        Adds to session, flushes to get generated values and refreshes so
        server-side defaults are loaded.
        """
        session.add(instance)
        await session.flush()
        await session.refresh(instance)

        entity_id = getattr(instance, "id", None)
        self._lazy.debug(lambda: f"db.create: {self.model.__name__}(id={entity_id})")
        return instance

    def keyset_columns(self) -> KeysetColumns:
        """Sortable columns of this repository's model."""
        return KeysetColumns.for_model(self.model)

    async def paginate_cursor(
        self,
        session: AsyncSession,
        statement: Select[Any] | None = None,
        *,
        options: PaginationOptions,
        columns: KeysetColumns | None = None,
    ) -> Page[T]:
        """Execute a keyset-paginated query.

        Decodes the request's active cursor, seeks past it, fetches one row
        more than the page size and assembles the page. This is the only I/O
        the pagination engine performs.

        Args:
            session: Database session
            statement: Filtered select without ORDER BY or LIMIT. Defaults to
                selecting every row of the model.
            options: Normalized pagination options
            columns: Sortable columns. Defaults to the model's ``id``, ``name``
                and ``updated_at`` attributes.

        Returns:
            Page of model instances in the requested order.

        Raises:
            InvalidCursorException: If the active cursor is malformed.

        Example:
            stmt = select(Contact).where(Contact.owner_id == owner_id)
            page = await repo.paginate_cursor(session, stmt, options=options)
            if page.has_more:
                next_options = options.model_copy(update={"next_cursor": page.next_cursor})
        """
        if statement is None:
            statement = select(self.model)
        if columns is None:
            columns = self.keyset_columns()

        cursor_filter = CursorFilter.from_options(options, columns)
        paginated = cursor_filter.apply(statement)
        self._lazy.debug(lambda: f"db.paginate_cursor: {self.model.__name__} SQL: {paginated}")

        result = await session.execute(paginated)
        rows = result.scalars().all()

        page = assemble_page(
            rows,
            options,
            cursor_for=lambda row: columns.cursor_for(row, options.sort_by),
        )
        self._lazy.debug(
            lambda: (
                f"db.paginate_cursor: {self.model.__name__}(limit={options.limit}, "
                f"direction={options.direction}, sort={options.sort}, sort_by={options.sort_by}, "
                f"anchored={cursor_filter.cursor is not None}) -> {len(page.items)} items, "
                f"has_more={page.has_more}"
            )
        )
        return page


__all__ = ["BaseRepository"]
