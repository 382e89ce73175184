"""Base schema classes for API payloads."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CustomBase(BaseModel):
    """Base model shared by every request and response schema.

    Fields are exposed in camelCase on the wire and accepted under either
    name on input.
    """

    model_config = ConfigDict(
        # Allow creation from ORM models (SQLAlchemy)
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        # Ignore extra fields (silently drop unexpected data)
        extra="ignore",
        str_strip_whitespace=True,
    )


class ResourceResponse(CustomBase):
    """Identity and timestamps common to every listed resource."""

    id: UUID
    created_at: datetime
    updated_at: datetime


__all__ = ["CustomBase", "ResourceResponse"]
