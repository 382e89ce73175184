"""Router registry and setup."""

from __future__ import annotations

from typing import TYPE_CHECKING

from skyvault.core.settings import get_app_settings
from skyvault.features.health.router import router as health_router
from skyvault.features.media.router import router as media_router
from skyvault.features.sharing.router import router as sharing_router

if TYPE_CHECKING:
    from fastapi import FastAPI

    from skyvault.core.settings.app import AppSettings


def setup_routers(app: FastAPI, app_settings: AppSettings | None = None) -> None:
    """Register all feature routers under the API prefix.

    Args:
        app: FastAPI application instance.
        app_settings: Optional settings override for the API prefix.
    """
    app_settings = app_settings or get_app_settings()
    api_prefix = app_settings.api_prefix

    app.include_router(health_router, prefix=api_prefix)
    app.include_router(media_router, prefix=api_prefix)
    app.include_router(sharing_router, prefix=api_prefix)
