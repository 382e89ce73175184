"""Liveness endpoint."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter

from skyvault.core.database import utc_now
from skyvault.core.schemas import CustomBase
from skyvault.core.settings import get_app_settings

router = APIRouter(tags=["health"])


class HealthResponse(CustomBase):
    """Liveness report. Does not touch the database."""

    status: str = "healthy"
    service: str
    version: str
    timestamp: datetime


@router.get("/health", response_model=HealthResponse, summary="Liveness check")
async def health_check() -> HealthResponse:
    settings = get_app_settings()
    return HealthResponse(service=settings.service_name, version=settings.version, timestamp=utc_now())
