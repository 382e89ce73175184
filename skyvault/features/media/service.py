"""Service layer for folder and file listings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from skyvault.core.services.base import BaseService
from skyvault.features.media.models import FileInfo, FolderInfo
from skyvault.features.media.repository import (
    FileInfoRepository,
    FolderInfoRepository,
    get_file_repository,
    get_folder_repository,
)

if TYPE_CHECKING:
    from uuid import UUID

    from sqlalchemy.ext.asyncio import AsyncSession

    from skyvault.core.pagination import Page, PaginationOptions
    from skyvault.features.media.schemas import FileCreate, FolderCreate


class MediaService(BaseService):
    """Owner-scoped folder and file operations.

    A ``folder_id`` of ``None`` always means the owner's root. Any other
    folder must exist, belong to the owner and not be trashed, otherwise
    ``NotFoundError`` propagates to the caller.
    """

    def __init__(
        self,
        session: AsyncSession,
        folder_repository: FolderInfoRepository | None = None,
        file_repository: FileInfoRepository | None = None,
    ) -> None:
        super().__init__()
        self._session = session
        self._folders = folder_repository or get_folder_repository()
        self._files = file_repository or get_file_repository()

    async def _ensure_folder(self, owner_id: UUID, folder_id: UUID | None) -> None:
        if folder_id is not None:
            await self._folders.get_live(self._session, owner_id, folder_id)

    async def create_folder(self, owner_id: UUID, payload: FolderCreate) -> FolderInfo:
        """Create a folder under an existing parent (or the root)."""
        await self._ensure_folder(owner_id, payload.parent_folder_id)
        folder = await self._folders.create(
            self._session,
            FolderInfo(owner_id=owner_id, **payload.model_dump()),
        )

        self.logger.info(
            "Folder created",
            extra={
                "folder_id": str(folder.id),
                "parent_folder_id": str(payload.parent_folder_id) if payload.parent_folder_id else None,
                "operation": "service.create_folder",
            },
        )
        return folder

    async def create_file(self, owner_id: UUID, payload: FileCreate) -> FileInfo:
        """Register file metadata in an existing folder (or the root)."""
        await self._ensure_folder(owner_id, payload.folder_id)
        file = await self._files.create(
            self._session,
            FileInfo(owner_id=owner_id, **payload.model_dump()),
        )

        self.logger.info(
            "File created",
            extra={
                "file_id": str(file.id),
                "folder_id": str(payload.folder_id) if payload.folder_id else None,
                "size": payload.size,
                "operation": "service.create_file",
            },
        )
        return file

    async def list_folders(
        self,
        owner_id: UUID,
        parent_folder_id: UUID | None,
        options: PaginationOptions,
    ) -> Page[FolderInfo]:
        """Page through the sub-folders of a folder."""
        await self._ensure_folder(owner_id, parent_folder_id)
        page = await self._folders.list_children(
            self._session, owner_id, parent_folder_id, options=options
        )
        self._lazy.debug(
            lambda: f"service.list_folders({parent_folder_id}) -> {len(page.items)} items, has_more={page.has_more}"
        )
        return page

    async def list_files(
        self,
        owner_id: UUID,
        folder_id: UUID | None,
        options: PaginationOptions,
    ) -> Page[FileInfo]:
        """Page through the files of a folder."""
        await self._ensure_folder(owner_id, folder_id)
        page = await self._files.list_in_folder(self._session, owner_id, folder_id, options=options)
        self._lazy.debug(
            lambda: f"service.list_files({folder_id}) -> {len(page.items)} items, has_more={page.has_more}"
        )
        return page

    async def get_folder_content(
        self,
        owner_id: UUID,
        folder_id: UUID | None,
        file_options: PaginationOptions,
        folder_options: PaginationOptions,
    ) -> tuple[Page[FileInfo], Page[FolderInfo]]:
        """Page files and sub-folders of one folder, each with its own options.

        Returns:
            ``(files, folders)`` pages.
        """
        await self._ensure_folder(owner_id, folder_id)
        files = await self._files.list_in_folder(
            self._session, owner_id, folder_id, options=file_options
        )
        folders = await self._folders.list_children(
            self._session, owner_id, folder_id, options=folder_options
        )
        return files, folders


__all__ = ["MediaService"]
