"""Pydantic schemas for the media feature."""

from __future__ import annotations

from uuid import UUID

from pydantic import Field, field_validator

from skyvault.core.pagination import Page
from skyvault.core.schemas import CustomBase, ResourceResponse


class EntryCreate(CustomBase):
    """Shared attributes for folder and file payloads."""

    name: str = Field(..., min_length=1, max_length=255, description="Entry name")

    @field_validator("name")
    @classmethod
    def reject_path_names(cls, v: str) -> str:
        """Names are single path segments."""
        if v in {".", ".."} or "/" in v:
            msg = "name must not be '.', '..' or contain '/'"
            raise ValueError(msg)
        return v


class FolderCreate(EntryCreate):
    """Payload used when creating a folder."""

    parent_folder_id: UUID | None = Field(
        default=None,
        description="Containing folder; omit to create at the root",
    )


class FileCreate(EntryCreate):
    """Payload used when registering a file."""

    folder_id: UUID | None = Field(
        default=None,
        description="Containing folder; omit to place the file at the root",
    )
    size: int = Field(default=0, ge=0, description="Size in bytes")
    mime_type: str = Field(
        default="application/octet-stream",
        min_length=1,
        max_length=255,
        description="Media type of the content",
    )


class FolderInfoResponse(ResourceResponse):
    """Folder as returned from the API."""

    name: str
    parent_folder_id: UUID | None = None


class FileInfoResponse(ResourceResponse):
    """File metadata as returned from the API."""

    name: str
    folder_id: UUID | None = None
    size: int
    mime_type: str


class FolderContentResponse(CustomBase):
    """Files and sub-folders of one folder, each paged independently."""

    files: Page[FileInfoResponse]
    folders: Page[FolderInfoResponse]
