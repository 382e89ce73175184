"""Media feature: folders and file metadata with keyset-paged listings."""

from __future__ import annotations

from .models import FileInfo, FolderInfo
from .repository import (
    FileInfoRepository,
    FolderInfoRepository,
    get_file_repository,
    get_folder_repository,
)
from .router import router
from .service import MediaService

__all__ = [
    "FileInfo",
    "FileInfoRepository",
    "FolderInfo",
    "FolderInfoRepository",
    "MediaService",
    "get_file_repository",
    "get_folder_repository",
    "router",
]
