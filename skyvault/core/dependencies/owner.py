"""Resource owner dependency.

Authentication happens in front of this service; the gateway forwards the
authenticated owner's identity in the ``X-Owner-ID`` header. Every listing and
write is scoped to that owner.
"""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header

from skyvault.infra.logging.context import set_log_context


async def get_owner_id(
    owner_id: UUID = Header(alias="X-Owner-ID", description="Identity of the calling owner"),
) -> UUID:
    """Return the caller's owner ID and bind it to the log context."""
    set_log_context(owner_id=str(owner_id))
    return owner_id


OwnerId = Annotated[UUID, Depends(get_owner_id)]

__all__ = ["OwnerId", "get_owner_id"]
