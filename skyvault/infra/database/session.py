"""Database engine and session management.

The engine and session factory are created at import time from
``DatabaseSettings``; connections are only opened on first use.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from skyvault.core.settings import get_app_settings, get_db_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)

db_settings = get_db_settings()
app_settings = get_app_settings()

engine = create_async_engine(
    db_settings.url,
    echo=db_settings.echo or app_settings.debug,
    pool_pre_ping=not db_settings.is_sqlite,
)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Get async database session.

    Yields:
        Database session that is automatically closed.

    Example:
        async with get_async_session() as session:
            result = await session.execute(select(FileInfo))
    """
    async with AsyncSessionLocal() as session:
        yield session


async def init_database() -> None:
    """Check connectivity and, when configured, create missing tables.

    Raises:
        sqlalchemy.exc.OperationalError: If the database cannot be reached.
    """
    # Register every model on Base.metadata before create_all
    import skyvault.features.media.models
    import skyvault.features.sharing.models  # noqa: F401
    from skyvault.core.database.base import Base

    logger.info("Initializing database connection", extra={"create_tables": db_settings.create_tables})
    async with engine.begin() as conn:
        await conn.execute(text("SELECT 1"))
        if db_settings.create_tables:
            await conn.run_sync(Base.metadata.create_all)
    logger.info("Database initialized")


async def close_database() -> None:
    """Dispose the engine's connection pool. Called during shutdown."""
    logger.info("Closing database connection")
    await engine.dispose()


__all__ = [
    "AsyncSessionLocal",
    "close_database",
    "engine",
    "get_async_session",
    "init_database",
]
