"""Logging configuration setup.

Builds a ``logging.config.dictConfig`` dictionary with a single console
handler that carries the context filter and either the JSONL or the plain
text formatter.
"""

from __future__ import annotations

import logging
import logging.config
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from skyvault.core.settings.logs import LoggingSettings

logger = logging.getLogger(__name__)
_LOGGING_INITIALIZED = False


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    force: bool = False,
    **configure_kwargs: Any,
) -> None:
    """Ensure logging is configured once across entrypoints.

    Args:
        log_settings: Logging settings. Loaded via get_logging_settings() if omitted.
        force: Reconfigure logging even if it was already initialized.
        **configure_kwargs: Explicit overrides for configure_logging().
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    if log_settings is None:
        from skyvault.core.settings import get_logging_settings

        log_settings = get_logging_settings()

    configure_logging(**{**log_settings.to_logging_kwargs(), **configure_kwargs})
    _LOGGING_INITIALIZED = True


def configure_logging(
    log_level: str = "INFO",
    *,
    service_name: str = "skyvault",
    json_logs: bool = True,
    include_context: bool = True,
    capture_warnings: bool = True,
    library_log_levels: dict[str, str] | None = None,
) -> None:
    """Configure the root logger.

    Args:
        log_level: Root logger level.
        service_name: Static ``service`` field in JSON records.
        json_logs: Emit JSON Lines instead of human-readable text.
        include_context: Attach ContextInjectingFilter to the handler.
        capture_warnings: Route warnings.warn() through logging.
        library_log_levels: Per-logger level overrides.
    """
    formatter_name = "json" if json_logs else "text"
    handler: dict[str, Any] = {
        "class": "logging.StreamHandler",
        "stream": "ext://sys.stderr",
        "formatter": formatter_name,
    }
    if include_context:
        handler["filters"] = ["context"]

    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": _build_formatters_config(json_logs, service_name),
        "filters": {
            "context": {"()": "skyvault.infra.logging.context.ContextInjectingFilter"},
        },
        "handlers": {"console": handler},
        "loggers": {
            name: {"level": level} for name, level in (library_log_levels or {}).items()
        },
        "root": {"level": log_level, "handlers": ["console"]},
    }

    logging.config.dictConfig(config)
    logging.captureWarnings(capture_warnings)
    logger.debug(
        "Logging configured",
        extra={"log_level": log_level, "json_logs": json_logs, "include_context": include_context},
    )


def _build_formatters_config(json_logs: bool, service_name: str) -> dict[str, Any]:
    if json_logs:
        return {
            "json": {
                "()": "skyvault.infra.logging.formatters.JSONFormatter",
                "static": {"service": service_name},
            },
        }
    return {
        "text": {
            "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    }
