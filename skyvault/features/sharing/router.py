"""API router for the sharing feature.

Endpoints:
    POST   /sharing/contacts                             - Add a contact
    GET    /sharing/contacts?search=...                  - Page contacts
    POST   /sharing/contact-groups                       - Create a group
    GET    /sharing/contact-groups?search=...            - Page groups
    POST   /sharing/contact-groups/{group_id}/members    - Add a contact to a group
    GET    /sharing/contact-groups/{group_id}/members    - Page a group's members

``search`` matches case-insensitively on contact name or email, or on the
group name.
"""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from skyvault.core.dependencies import OwnerId, PagingOptions, get_db_session
from skyvault.core.pagination import Page
from skyvault.features.sharing.schemas import (
    ContactCreate,
    ContactGroupCreate,
    ContactGroupResponse,
    ContactResponse,
    GroupMemberAdd,
)
from skyvault.features.sharing.service import SharingService

router = APIRouter(prefix="/sharing", tags=["sharing"])


def get_sharing_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> SharingService:
    return SharingService(session)


SharingServiceDep = Annotated[SharingService, Depends(get_sharing_service)]
SessionDep = Annotated[AsyncSession, Depends(get_db_session)]
SearchQuery = Annotated[str | None, Query(max_length=255, description="Case-insensitive substring")]


@router.post(
    "/contacts",
    response_model=ContactResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add contact",
)
async def create_contact(
    payload: ContactCreate,
    owner_id: OwnerId,
    service: SharingServiceDep,
    session: SessionDep,
) -> ContactResponse:
    contact = await service.create_contact(owner_id, payload)
    await session.commit()
    return ContactResponse.model_validate(contact)


@router.get("/contacts", response_model=Page[ContactResponse], summary="List contacts")
async def list_contacts(
    owner_id: OwnerId,
    options: PagingOptions,
    service: SharingServiceDep,
    search: SearchQuery = None,
) -> Page[ContactResponse]:
    page = await service.list_contacts(owner_id, options, search=search)
    return page.to_schema(ContactResponse)


@router.post(
    "/contact-groups",
    response_model=ContactGroupResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create contact group",
)
async def create_contact_group(
    payload: ContactGroupCreate,
    owner_id: OwnerId,
    service: SharingServiceDep,
    session: SessionDep,
) -> ContactGroupResponse:
    group = await service.create_group(owner_id, payload)
    await session.commit()
    return ContactGroupResponse.model_validate(group)


@router.get("/contact-groups", response_model=Page[ContactGroupResponse], summary="List contact groups")
async def list_contact_groups(
    owner_id: OwnerId,
    options: PagingOptions,
    service: SharingServiceDep,
    search: SearchQuery = None,
) -> Page[ContactGroupResponse]:
    page = await service.list_groups(owner_id, options, search=search)
    return page.to_schema(ContactGroupResponse)


@router.post(
    "/contact-groups/{group_id}/members",
    response_model=ContactResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add group member",
)
async def add_group_member(
    group_id: UUID,
    payload: GroupMemberAdd,
    owner_id: OwnerId,
    service: SharingServiceDep,
    session: SessionDep,
) -> ContactResponse:
    contact = await service.add_member(owner_id, group_id, payload.contact_id)
    await session.commit()
    return ContactResponse.model_validate(contact)


@router.get(
    "/contact-groups/{group_id}/members",
    response_model=Page[ContactResponse],
    summary="List group members",
)
async def list_group_members(
    group_id: UUID,
    owner_id: OwnerId,
    options: PagingOptions,
    service: SharingServiceDep,
) -> Page[ContactResponse]:
    page = await service.list_members(owner_id, group_id, options)
    return page.to_schema(ContactResponse)
