"""API router for the media feature.

Endpoints:
    POST   /media/folders                        - Create a folder
    GET    /media/folders?parent-id=...          - Page sub-folders of a folder
    POST   /media/files                          - Register a file
    GET    /media/files?folder-id=...            - Page files of a folder
    GET    /media/content                        - Page files and folders at the root
    GET    /media/folders/{folder_id}/content    - Page files and folders of a folder

Omitting ``parent-id`` / ``folder-id`` lists the owner's root. Listings accept
``limit``, ``direction``, ``sort``, ``sort-by``, ``next-cursor`` and
``prev-cursor``; the content endpoints take them once per collection with a
``file-`` or ``folder-`` prefix.

Example Usage:
    GET /media/files?folder-id={id}&direction=forward&sort=asc&sort-by=name&limit=3
    GET /media/files?folder-id={id}&direction=forward&sort=asc&sort-by=name&limit=3&next-cursor={nextCursor}
"""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from skyvault.core.dependencies import (
    FilePagingOptions,
    FolderPagingOptions,
    OwnerId,
    PagingOptions,
    get_db_session,
)
from skyvault.core.pagination import Page, PaginationOptions
from skyvault.features.media.schemas import (
    FileCreate,
    FileInfoResponse,
    FolderContentResponse,
    FolderCreate,
    FolderInfoResponse,
)
from skyvault.features.media.service import MediaService

router = APIRouter(prefix="/media", tags=["media"])


def get_media_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> MediaService:
    return MediaService(session)


MediaServiceDep = Annotated[MediaService, Depends(get_media_service)]
SessionDep = Annotated[AsyncSession, Depends(get_db_session)]


@router.post(
    "/folders",
    response_model=FolderInfoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create folder",
)
async def create_folder(
    payload: FolderCreate,
    owner_id: OwnerId,
    service: MediaServiceDep,
    session: SessionDep,
) -> FolderInfoResponse:
    folder = await service.create_folder(owner_id, payload)
    await session.commit()
    return FolderInfoResponse.model_validate(folder)


@router.get(
    "/folders",
    response_model=Page[FolderInfoResponse],
    summary="List folders",
    description="Page through the live sub-folders of a folder, or of the root when `parent-id` is omitted.",
)
async def list_folders(
    owner_id: OwnerId,
    options: PagingOptions,
    service: MediaServiceDep,
    parent_id: UUID | None = Query(default=None, alias="parent-id"),
) -> Page[FolderInfoResponse]:
    page = await service.list_folders(owner_id, parent_id, options)
    return page.to_schema(FolderInfoResponse)


@router.post(
    "/files",
    response_model=FileInfoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register file",
)
async def create_file(
    payload: FileCreate,
    owner_id: OwnerId,
    service: MediaServiceDep,
    session: SessionDep,
) -> FileInfoResponse:
    file = await service.create_file(owner_id, payload)
    await session.commit()
    return FileInfoResponse.model_validate(file)


@router.get(
    "/files",
    response_model=Page[FileInfoResponse],
    summary="List files",
    description="Page through the live files of a folder, or of the root when `folder-id` is omitted.",
)
async def list_files(
    owner_id: OwnerId,
    options: PagingOptions,
    service: MediaServiceDep,
    folder_id: UUID | None = Query(default=None, alias="folder-id"),
) -> Page[FileInfoResponse]:
    page = await service.list_files(owner_id, folder_id, options)
    return page.to_schema(FileInfoResponse)


async def _folder_content(
    service: MediaService,
    owner_id: UUID,
    folder_id: UUID | None,
    file_options: PaginationOptions,
    folder_options: PaginationOptions,
) -> FolderContentResponse:
    files, folders = await service.get_folder_content(owner_id, folder_id, file_options, folder_options)
    return FolderContentResponse(
        files=files.to_schema(FileInfoResponse),
        folders=folders.to_schema(FolderInfoResponse),
    )


@router.get(
    "/content",
    response_model=FolderContentResponse,
    summary="List root content",
)
async def get_root_content(
    owner_id: OwnerId,
    file_options: FilePagingOptions,
    folder_options: FolderPagingOptions,
    service: MediaServiceDep,
) -> FolderContentResponse:
    return await _folder_content(service, owner_id, None, file_options, folder_options)


@router.get(
    "/folders/{folder_id}/content",
    response_model=FolderContentResponse,
    summary="List folder content",
    description="Files and sub-folders are paged independently using `file-*` and `folder-*` parameters.",
)
async def get_folder_content(
    folder_id: UUID,
    owner_id: OwnerId,
    file_options: FilePagingOptions,
    folder_options: FolderPagingOptions,
    service: MediaServiceDep,
) -> FolderContentResponse:
    return await _folder_content(service, owner_id, folder_id, file_options, folder_options)
