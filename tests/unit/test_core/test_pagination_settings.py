"""Unit tests for pagination and application settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from skyvault.core.settings import (
    DatabaseSettings,
    PaginationSettings,
    clear_all_caches,
    get_pagination_settings,
)


def test_pagination_defaults():
    settings = PaginationSettings()

    assert settings.default_limit == 100
    assert settings.max_limit == 1000
    assert settings.max_cursor_length == 2048


def test_pagination_settings_read_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("PAGINATION_DEFAULT_LIMIT", "20")
    monkeypatch.setenv("PAGINATION_MAX_LIMIT", "200")
    clear_all_caches()

    settings = get_pagination_settings()

    assert settings.default_limit == 20
    assert settings.max_limit == 200
    assert get_pagination_settings() is settings


def test_default_limit_cannot_exceed_max():
    with pytest.raises(ValidationError, match="must not exceed"):
        PaginationSettings(default_limit=500, max_limit=100)


def test_pagination_settings_are_frozen():
    settings = PaginationSettings()

    with pytest.raises(ValidationError):
        settings.max_limit = 5  # type: ignore[misc]


def test_database_url_requires_async_driver():
    with pytest.raises(ValidationError, match="async driver"):
        DatabaseSettings(url="sqlite:///./skyvault.db")

    assert DatabaseSettings(url="sqlite+aiosqlite:///:memory:").is_sqlite
