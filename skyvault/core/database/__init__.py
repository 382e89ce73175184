"""Core database package: declarative base, mixins, filters and exceptions.

Base Classes and Mixins:
    - Base: Declarative base with constraint naming convention
    - UUIDPKMixin: UUID v4 primary key
    - TimestampMixin: created_at, updated_at tracking
    - UUIDTimestampedBase: UUID PK + timestamps

Query Filters:
    - StatementFilter: Base class for statement filters
    - SearchFilter: Multi-field text search with LIKE

The generic repository lives in ``skyvault.core.database.repository``; it is
not re-exported here because it depends on the pagination package, which in
turn builds on these filters.
"""

from skyvault.core.database.base import (
    NAMING_CONVENTION,
    Base,
    TimestampMixin,
    UUIDPKMixin,
    UUIDTimestampedBase,
    utc_now,
)
from skyvault.core.database.exceptions import NotFoundError, RepositoryError
from skyvault.core.database.filters import SearchFilter, StatementFilter

__all__ = [
    "NAMING_CONVENTION",
    "Base",
    "NotFoundError",
    "RepositoryError",
    "SearchFilter",
    "StatementFilter",
    "TimestampMixin",
    "UUIDPKMixin",
    "UUIDTimestampedBase",
    "utc_now",
]
