"""Structured logging: dictConfig setup, JSONL output, context and lazy loggers.

Usage:
    from skyvault.infra.logging import get_lazy_logger, set_log_context

    logger = get_lazy_logger(__name__)
    set_log_context(request_id="abc-123")
    logger.debug(lambda: f"Fetched {len(rows)} rows")
"""

from skyvault.infra.logging.config import configure_logging, setup_logging
from skyvault.infra.logging.context import (
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    set_log_context,
)
from skyvault.infra.logging.formatters import JSONFormatter
from skyvault.infra.logging.lazy import LazyLoggerAdapter, get_lazy_logger

__all__ = [
    "ContextInjectingFilter",
    "JSONFormatter",
    "LazyLoggerAdapter",
    "clear_log_context",
    "configure_logging",
    "get_lazy_logger",
    "get_log_context",
    "set_log_context",
    "setup_logging",
]
