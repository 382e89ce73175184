"""Repositories for the media feature."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from skyvault.core.database.exceptions import NotFoundError
from skyvault.core.database.repository import BaseRepository
from skyvault.features.media.models import FileInfo, FolderInfo

if TYPE_CHECKING:
    from uuid import UUID

    from sqlalchemy.ext.asyncio import AsyncSession

    from skyvault.core.pagination import Page, PaginationOptions


class FolderInfoRepository(BaseRepository[FolderInfo]):
    """Repository for FolderInfo model.

    Inherits from BaseRepository:
        - get(session, id) -> FolderInfo | None
        - get_or_raise(session, id) -> FolderInfo
        - create(session, instance) -> FolderInfo
        - paginate_cursor(session, statement, options=...) -> Page[FolderInfo]
    """

    def __init__(self) -> None:
        super().__init__(FolderInfo)

    async def get_live(
        self,
        session: AsyncSession,
        owner_id: UUID,
        folder_id: UUID,
    ) -> FolderInfo:
        """Get a non-trashed folder owned by ``owner_id``.

        Raises:
            NotFoundError: If no such live folder exists for this owner
        """
        stmt = select(FolderInfo).where(
            FolderInfo.id == folder_id,
            FolderInfo.owner_id == owner_id,
            FolderInfo.trashed_at.is_(None),
        )
        result = await session.execute(stmt)
        folder = result.scalar_one_or_none()

        self._lazy.debug(lambda: f"db.get_live({folder_id}) -> {folder is not None}")
        if folder is None:
            raise NotFoundError("FolderInfo", {"id": folder_id})
        return folder

    async def list_children(
        self,
        session: AsyncSession,
        owner_id: UUID,
        parent_folder_id: UUID | None,
        *,
        options: PaginationOptions,
    ) -> Page[FolderInfo]:
        """Page through the live folders directly under a parent (or the root)."""
        stmt = select(FolderInfo).where(
            FolderInfo.owner_id == owner_id,
            FolderInfo.trashed_at.is_(None),
        )
        if parent_folder_id is None:
            stmt = stmt.where(FolderInfo.parent_folder_id.is_(None))
        else:
            stmt = stmt.where(FolderInfo.parent_folder_id == parent_folder_id)

        return await self.paginate_cursor(session, stmt, options=options)


class FileInfoRepository(BaseRepository[FileInfo]):
    """Repository for FileInfo model."""

    def __init__(self) -> None:
        super().__init__(FileInfo)

    async def list_in_folder(
        self,
        session: AsyncSession,
        owner_id: UUID,
        folder_id: UUID | None,
        *,
        options: PaginationOptions,
    ) -> Page[FileInfo]:
        """Page through the live files in a folder (or the root)."""
        stmt = select(FileInfo).where(
            FileInfo.owner_id == owner_id,
            FileInfo.trashed_at.is_(None),
        )
        if folder_id is None:
            stmt = stmt.where(FileInfo.folder_id.is_(None))
        else:
            stmt = stmt.where(FileInfo.folder_id == folder_id)

        return await self.paginate_cursor(session, stmt, options=options)


_folder_repository: FolderInfoRepository | None = None
_file_repository: FileInfoRepository | None = None


def get_folder_repository() -> FolderInfoRepository:
    """Get the shared FolderInfoRepository instance."""
    global _folder_repository
    if _folder_repository is None:
        _folder_repository = FolderInfoRepository()
    return _folder_repository


def get_file_repository() -> FileInfoRepository:
    """Get the shared FileInfoRepository instance."""
    global _file_repository
    if _file_repository is None:
        _file_repository = FileInfoRepository()
    return _file_repository
