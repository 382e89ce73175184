"""Pagination settings for listing endpoints.

Every listing in the service is keyset paginated through the same engine,
so the defaults and hard caps live in one place.

Environment variables use PAGINATION_ prefix.
Example: PAGINATION_DEFAULT_LIMIT=50, PAGINATION_MAX_LIMIT=500
"""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Keyset pagination configuration.

    Attributes:
        default_limit: Page size used when the request asks for zero or fewer items.
        max_limit: Hard upper bound; larger requests are clamped, not rejected.
        max_cursor_length: Longest cursor string accepted before decoding.

    Example:
        settings = PaginationSettings()
        limit = min(requested_limit, settings.max_limit)
    """

    default_limit: int = Field(
        default=100,
        ge=1,
        le=10000,
        description="Default page size when limit is missing or not positive",
    )
    max_limit: int = Field(
        default=1000,
        ge=1,
        le=10000,
        description="Maximum allowed page size (larger values are clamped)",
    )
    max_cursor_length: int = Field(
        default=2048,
        ge=16,
        le=65536,
        description="Maximum accepted length of an encoded cursor string",
    )

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def _default_within_max(self) -> PaginationSettings:
        if self.default_limit > self.max_limit:
            msg = (
                f"default_limit ({self.default_limit}) must not exceed "
                f"max_limit ({self.max_limit})"
            )
            raise ValueError(msg)
        return self
