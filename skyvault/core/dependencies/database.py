"""Database dependencies for FastAPI route handlers.

Two session getters exist for different use cases:

1. `get_db_session()` (this module): FastAPI dependency, session lifecycle
   tied to the HTTP request. Tests override it to point at their own engine.
2. `get_async_session()` (infra.database): framework-agnostic async context
   manager for scripts and background work.

Usage:
    @router.get("/files")
    async def list_files(session: Annotated[AsyncSession, Depends(get_db_session)]):
        ...
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from skyvault.infra.database import get_async_session


async def get_db_session() -> AsyncGenerator[AsyncSession]:
    """FastAPI dependency for database session.

    Yields:
        Database session that is automatically closed after request.
    """
    async with get_async_session() as session:
        yield session
