"""FastAPI dependencies shared across features."""

from skyvault.core.dependencies.database import get_db_session
from skyvault.core.dependencies.owner import OwnerId, get_owner_id
from skyvault.core.dependencies.pagination import (
    FilePagingOptions,
    FolderPagingOptions,
    PagingOptions,
    paging_options,
)

__all__ = [
    "FilePagingOptions",
    "FolderPagingOptions",
    "OwnerId",
    "PagingOptions",
    "get_db_session",
    "get_owner_id",
    "paging_options",
]
