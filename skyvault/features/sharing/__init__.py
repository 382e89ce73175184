"""Sharing feature: contacts and contact groups with keyset-paged listings."""

from __future__ import annotations

from .models import Contact, ContactGroup, ContactGroupMember
from .repository import (
    ContactGroupRepository,
    ContactRepository,
    get_contact_group_repository,
    get_contact_repository,
)
from .router import router
from .service import SharingService

__all__ = [
    "Contact",
    "ContactGroup",
    "ContactGroupMember",
    "ContactGroupRepository",
    "ContactRepository",
    "SharingService",
    "get_contact_group_repository",
    "get_contact_repository",
    "router",
]
