"""SQLAlchemy models for the media feature."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import BigInteger, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from skyvault.core.database import UUIDTimestampedBase


class FolderInfo(UUIDTimestampedBase):
    """A folder owned by a single owner.

    Folders without a parent live at the owner's root. Trashed folders keep
    their row but drop out of every listing.
    """

    __tablename__ = "folder_infos"
    __table_args__ = (
        Index("ix_folder_infos_owner_parent_name", "owner_id", "parent_folder_id", "name"),
    )

    owner_id: Mapped[UUID] = mapped_column(nullable=False, index=True)
    parent_folder_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("folder_infos.id", ondelete="CASCADE"),
        nullable=True,
        comment="Containing folder; NULL for the owner's root",
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    trashed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        comment="When the folder was moved to trash",
    )

    def __repr__(self) -> str:
        return f"<FolderInfo(id={self.id}, name={self.name!r})>"


class FileInfo(UUIDTimestampedBase):
    """Metadata of a stored file. Blob storage itself is handled elsewhere."""

    __tablename__ = "file_infos"
    __table_args__ = (
        Index("ix_file_infos_owner_folder_name", "owner_id", "folder_id", "name"),
    )

    owner_id: Mapped[UUID] = mapped_column(nullable=False, index=True)
    folder_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("folder_infos.id", ondelete="CASCADE"),
        nullable=True,
        comment="Containing folder; NULL for the owner's root",
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    size: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    mime_type: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="application/octet-stream",
    )
    trashed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        comment="When the file was moved to trash",
    )

    def __repr__(self) -> str:
        return f"<FileInfo(id={self.id}, name={self.name!r})>"
