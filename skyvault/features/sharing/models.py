"""SQLAlchemy models for the sharing feature."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from skyvault.core.database import Base, UUIDTimestampedBase, utc_now


class Contact(UUIDTimestampedBase):
    """Someone an owner can share with. Emails are unique per owner."""

    __tablename__ = "contacts"
    __table_args__ = (UniqueConstraint("owner_id", "email"),)

    owner_id: Mapped[UUID] = mapped_column(nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Contact(id={self.id}, email={self.email!r})>"


class ContactGroup(UUIDTimestampedBase):
    """A named set of contacts."""

    __tablename__ = "contact_groups"

    owner_id: Mapped[UUID] = mapped_column(nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<ContactGroup(id={self.id}, name={self.name!r})>"


class ContactGroupMember(Base):
    """Membership of a contact in a group."""

    __tablename__ = "contact_group_members"

    group_id: Mapped[UUID] = mapped_column(
        ForeignKey("contact_groups.id", ondelete="CASCADE"),
        primary_key=True,
    )
    contact_id: Mapped[UUID] = mapped_column(
        ForeignKey("contacts.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=func.now(),
    )
