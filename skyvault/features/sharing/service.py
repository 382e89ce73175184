"""Service layer for contacts and contact groups."""

from __future__ import annotations

from typing import TYPE_CHECKING

from skyvault.core.exceptions import ConflictException
from skyvault.core.services.base import BaseService
from skyvault.features.sharing.models import Contact, ContactGroup
from skyvault.features.sharing.repository import (
    ContactGroupRepository,
    ContactRepository,
    get_contact_group_repository,
    get_contact_repository,
)

if TYPE_CHECKING:
    from uuid import UUID

    from sqlalchemy.ext.asyncio import AsyncSession

    from skyvault.core.pagination import Page, PaginationOptions
    from skyvault.features.sharing.schemas import ContactCreate, ContactGroupCreate


class SharingService(BaseService):
    """Owner-scoped contact and group operations.

    Groups and contacts of another owner are reported as missing.
    """

    def __init__(
        self,
        session: AsyncSession,
        contact_repository: ContactRepository | None = None,
        group_repository: ContactGroupRepository | None = None,
    ) -> None:
        super().__init__()
        self._session = session
        self._contacts = contact_repository or get_contact_repository()
        self._groups = group_repository or get_contact_group_repository()

    async def create_contact(self, owner_id: UUID, payload: ContactCreate) -> Contact:
        """Add a contact.

        Raises:
            ConflictException: If the owner already has a contact with this email
        """
        if await self._contacts.get_by_email(self._session, owner_id, payload.email) is not None:
            raise ConflictException(
                detail=f"Contact with email {payload.email} already exists",
                type="contact-exists",
                extra={"email": payload.email},
            )
        contact = await self._contacts.create(
            self._session,
            Contact(owner_id=owner_id, **payload.model_dump()),
        )

        self.logger.info(
            "Contact created",
            extra={"contact_id": str(contact.id), "operation": "service.create_contact"},
        )
        return contact

    async def create_group(self, owner_id: UUID, payload: ContactGroupCreate) -> ContactGroup:
        """Create an empty contact group."""
        group = await self._groups.create(
            self._session,
            ContactGroup(owner_id=owner_id, **payload.model_dump()),
        )

        self.logger.info(
            "Contact group created",
            extra={"group_id": str(group.id), "operation": "service.create_group"},
        )
        return group

    async def add_member(self, owner_id: UUID, group_id: UUID, contact_id: UUID) -> Contact:
        """Add one of the owner's contacts to one of the owner's groups.

        Returns:
            The added contact.

        Raises:
            NotFoundError: If the group or contact does not exist for this owner
            ConflictException: If the contact is already a member
        """
        await self._groups.get_or_raise(self._session, group_id, owner_id=owner_id)
        contact = await self._contacts.get_or_raise(self._session, contact_id, owner_id=owner_id)

        if await self._groups.get_member(self._session, group_id, contact_id) is not None:
            raise ConflictException(
                detail="Contact is already a member of this group",
                type="member-exists",
                extra={"group_id": str(group_id), "contact_id": str(contact_id)},
            )
        await self._groups.add_member(self._session, group_id, contact_id)

        self.logger.info(
            "Contact added to group",
            extra={
                "group_id": str(group_id),
                "contact_id": str(contact_id),
                "operation": "service.add_member",
            },
        )
        return contact

    async def list_contacts(
        self,
        owner_id: UUID,
        options: PaginationOptions,
        *,
        search: str | None = None,
    ) -> Page[Contact]:
        page = await self._contacts.list_for_owner(self._session, owner_id, search=search, options=options)
        self._lazy.debug(
            lambda: f"service.list_contacts(search={search!r}) -> {len(page.items)} items, has_more={page.has_more}"
        )
        return page

    async def list_groups(
        self,
        owner_id: UUID,
        options: PaginationOptions,
        *,
        search: str | None = None,
    ) -> Page[ContactGroup]:
        page = await self._groups.list_for_owner(self._session, owner_id, search=search, options=options)
        self._lazy.debug(
            lambda: f"service.list_groups(search={search!r}) -> {len(page.items)} items, has_more={page.has_more}"
        )
        return page

    async def list_members(
        self,
        owner_id: UUID,
        group_id: UUID,
        options: PaginationOptions,
    ) -> Page[Contact]:
        """Page through a group's members.

        Raises:
            NotFoundError: If the group does not exist for this owner
        """
        await self._groups.get_or_raise(self._session, group_id, owner_id=owner_id)
        return await self._contacts.list_group_members(
            self._session, owner_id, group_id, options=options
        )


__all__ = ["SharingService"]
