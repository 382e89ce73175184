"""Declarative base and column mixins for skyvault models.

Examples:
    Listing model with UUID identity and timestamps:

    class FolderInfo(UUIDTimestampedBase):
        __tablename__ = "folder_infos"

        name: Mapped[str] = mapped_column(String(255))

    Every keyset-paginated model exposes ``id`` and, where it can be sorted by
    them, ``name`` and ``updated_at``; ``KeysetColumns.for_model`` relies on
    these attribute names.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime, MetaData
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func

# Consistent naming convention for database constraints
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def utc_now() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Declarative base with a shared, convention-named metadata registry."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# ============================================================================
# Column Mixins
# ============================================================================


class UUIDPKMixin:
    """UUID v4 primary key.

    The identity doubles as the keyset tie-breaker, so it must be unique and
    totally ordered; UUIDs compare bytewise on every supported backend.
    """

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True,
        default=uuid.uuid4,
        comment="UUID v4 primary key",
    )


class TimestampMixin:
    """Timestamp tracking for create and update operations.

    Uses both Python-side defaults (so values are known before a refresh) and
    server defaults (for rows inserted outside the ORM).

    Provides:
        created_at: Timestamp of record creation
        updated_at: Timestamp of last modification, the ``updated`` sort key
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=func.now(),
        nullable=False,
        comment="Timestamp of record creation",
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=func.now(),
        onupdate=utc_now,
        nullable=False,
        index=True,
        comment="Timestamp of last update",
    )


class UUIDTimestampedBase(Base, UUIDPKMixin, TimestampMixin):
    """Abstract base: UUID primary key plus timestamps."""

    __abstract__ = True


__all__ = [
    "NAMING_CONVENTION",
    "Base",
    "TimestampMixin",
    "UUIDPKMixin",
    "UUIDTimestampedBase",
    "utc_now",
]
