"""Repository tests for contacts and group membership."""

from __future__ import annotations

import uuid

import pytest

from skyvault.core.database.exceptions import NotFoundError
from skyvault.core.pagination import PaginationOptions
from skyvault.features.sharing.models import Contact, ContactGroup
from skyvault.features.sharing.repository import ContactGroupRepository, ContactRepository


@pytest.fixture
def contacts() -> ContactRepository:
    return ContactRepository()


@pytest.fixture
def groups() -> ContactGroupRepository:
    return ContactGroupRepository()


async def test_members_sorted_by_updated_with_ties(db_session, owner_id, contacts, groups):
    group = await groups.create(db_session, ContactGroup(owner_id=owner_id, name="Team"))
    members = []
    for i in range(4):
        contact = await contacts.create(
            db_session, Contact(owner_id=owner_id, name=f"Member {i}", email=f"m{i}@example.com")
        )
        await groups.add_member(db_session, group.id, contact.id)
        members.append(contact)
    await db_session.commit()
    options = PaginationOptions(direction="forward", sort="asc", sort_by="updated", limit=3)

    first = await contacts.list_group_members(db_session, owner_id, group.id, options=options)
    second = await contacts.list_group_members(
        db_session,
        owner_id,
        group.id,
        options=options.model_copy(update={"next_cursor": first.next_cursor}),
    )

    seen = [c.id for c in first.items + second.items]
    assert sorted(seen) == sorted(m.id for m in members)
    assert len(set(seen)) == 4
    assert first.has_more is True
    assert second.has_more is False


async def test_get_or_raise_hides_other_owners(db_session, owner_id, groups):
    group = await groups.create(db_session, ContactGroup(owner_id=owner_id, name="Private"))

    assert await groups.get_or_raise(db_session, group.id, owner_id=owner_id) is group
    with pytest.raises(NotFoundError) as exc_info:
        await groups.get_or_raise(db_session, group.id, owner_id=uuid.uuid4())

    assert exc_info.value.model_name == "ContactGroup"


async def test_get_member(db_session, owner_id, contacts, groups):
    group = await groups.create(db_session, ContactGroup(owner_id=owner_id, name="Team"))
    contact = await contacts.create(db_session, Contact(owner_id=owner_id, name="Amy", email="amy@example.com"))

    assert await groups.get_member(db_session, group.id, contact.id) is None
    await groups.add_member(db_session, group.id, contact.id)
    assert await groups.get_member(db_session, group.id, contact.id) is not None
