"""Repositories for the sharing feature."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from skyvault.core.database.filters import SearchFilter
from skyvault.core.database.repository import BaseRepository
from skyvault.features.sharing.models import Contact, ContactGroup, ContactGroupMember

if TYPE_CHECKING:
    from uuid import UUID

    from sqlalchemy.ext.asyncio import AsyncSession

    from skyvault.core.pagination import Page, PaginationOptions


class ContactRepository(BaseRepository[Contact]):
    """Repository for Contact model."""

    def __init__(self) -> None:
        super().__init__(Contact)

    async def get_by_email(self, session: AsyncSession, owner_id: UUID, email: str) -> Contact | None:
        """Find an owner's contact by (already normalized) email."""
        stmt = select(Contact).where(Contact.owner_id == owner_id, Contact.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_owner(
        self,
        session: AsyncSession,
        owner_id: UUID,
        *,
        search: str | None = None,
        options: PaginationOptions,
    ) -> Page[Contact]:
        """Page through an owner's contacts, optionally matching name or email."""
        stmt = select(Contact).where(Contact.owner_id == owner_id)
        stmt = SearchFilter([Contact.name, Contact.email], search).apply(stmt)
        return await self.paginate_cursor(session, stmt, options=options)

    async def list_group_members(
        self,
        session: AsyncSession,
        owner_id: UUID,
        group_id: UUID,
        *,
        options: PaginationOptions,
    ) -> Page[Contact]:
        """Page through the contacts that belong to a group.

        Members are keyed on the contact's own columns, so the cursor of a
        member page is interchangeable with a contact cursor.
        """
        stmt = (
            select(Contact)
            .join(ContactGroupMember, ContactGroupMember.contact_id == Contact.id)
            .where(
                ContactGroupMember.group_id == group_id,
                Contact.owner_id == owner_id,
            )
        )
        return await self.paginate_cursor(session, stmt, options=options)


class ContactGroupRepository(BaseRepository[ContactGroup]):
    """Repository for ContactGroup model."""

    def __init__(self) -> None:
        super().__init__(ContactGroup)

    async def list_for_owner(
        self,
        session: AsyncSession,
        owner_id: UUID,
        *,
        search: str | None = None,
        options: PaginationOptions,
    ) -> Page[ContactGroup]:
        """Page through an owner's groups, optionally matching the name."""
        stmt = select(ContactGroup).where(ContactGroup.owner_id == owner_id)
        stmt = SearchFilter(ContactGroup.name, search).apply(stmt)
        return await self.paginate_cursor(session, stmt, options=options)

    async def get_member(
        self,
        session: AsyncSession,
        group_id: UUID,
        contact_id: UUID,
    ) -> ContactGroupMember | None:
        """Membership row for a contact in a group, if any."""
        return await session.get(ContactGroupMember, (group_id, contact_id))

    async def add_member(
        self,
        session: AsyncSession,
        group_id: UUID,
        contact_id: UUID,
    ) -> ContactGroupMember:
        """Insert a membership row."""
        member = ContactGroupMember(group_id=group_id, contact_id=contact_id)
        session.add(member)
        await session.flush()
        self._lazy.debug(lambda: f"db.add_member: group={group_id} contact={contact_id}")
        return member


_contact_repository: ContactRepository | None = None
_group_repository: ContactGroupRepository | None = None


def get_contact_repository() -> ContactRepository:
    """Get the shared ContactRepository instance."""
    global _contact_repository
    if _contact_repository is None:
        _contact_repository = ContactRepository()
    return _contact_repository


def get_contact_group_repository() -> ContactGroupRepository:
    """Get the shared ContactGroupRepository instance."""
    global _group_repository
    if _group_repository is None:
        _group_repository = ContactGroupRepository()
    return _group_repository
