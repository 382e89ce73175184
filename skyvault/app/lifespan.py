"""Application lifespan management.

Startup Order:
1. Logging
2. Database (connectivity check, optional table creation)

Shutdown Order: reverse of startup.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from skyvault.core.settings import get_app_settings, get_logging_settings
from skyvault.infra.database import close_database, init_database
from skyvault.infra.logging.config import setup_logging

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and the database around the application's lifetime.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application runtime.
    """
    settings = get_app_settings()
    setup_logging(log_settings=get_logging_settings(), force=True)
    logger.info(
        "Application starting",
        extra={
            "service": settings.service_name,
            "version": settings.version,
            "environment": settings.environment,
        },
    )

    await init_database()
    try:
        yield
    finally:
        logger.info("Application shutting down", extra={"service": settings.service_name})
        await close_database()
