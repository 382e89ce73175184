"""Pydantic schemas for the sharing feature."""

from __future__ import annotations

from uuid import UUID

from pydantic import Field, field_validator

from skyvault.core.schemas import CustomBase, ResourceResponse


class ContactCreate(CustomBase):
    """Payload used when adding a contact."""

    email: str = Field(..., min_length=3, max_length=320, description="Contact email address")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Emails compare case-insensitively, so store them lower-cased."""
        local, sep, domain = v.partition("@")
        if not sep or not local or not domain:
            msg = "email must look like name@domain"
            raise ValueError(msg)
        return v.lower()


class ContactGroupCreate(CustomBase):
    """Payload used when creating a contact group."""

    name: str = Field(..., min_length=1, max_length=255, description="Group name")


class GroupMemberAdd(CustomBase):
    """Payload used when adding a contact to a group."""

    contact_id: UUID


class ContactResponse(ResourceResponse):
    """Contact as returned from the API."""

    email: str
    name: str


class ContactGroupResponse(ResourceResponse):
    """Contact group as returned from the API."""

    name: str
