"""Structured logging configuration for mustache-resolver.

This module provides structlog-based logging with:
- JSON output for production (when env var MUSTACHE_LOG_FORMAT=json)
- Pretty console output for development (default)
- Context binding through structlog contextvars

The library itself never configures logging on import. Host applications
(or the bundled CLI) call ``configure_logging()`` once at startup.

Usage:
    from mustache_resolver.logging import get_logger, configure_logging

    configure_logging()

    log = get_logger(__name__)
    log = log.bind(template_id="welcome-mail")
    log.info("translation_started", tokens=3)
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.types import Processor

__all__ = [
    "get_logger",
    "configure_logging",
    "bind_context",
    "clear_context",
]

# Environment variable for log format
LOG_FORMAT_ENV_VAR = "MUSTACHE_LOG_FORMAT"

# Environment variable for log level
LOG_LEVEL_ENV_VAR = "MUSTACHE_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"


def _get_log_level() -> int:
    """Get the log level from environment or default.

    Returns:
        Logging level constant (e.g., logging.WARNING).
    """
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.WARNING)


def _is_json_output() -> bool:
    return os.environ.get(LOG_FORMAT_ENV_VAR, "").lower() == "json"


def _get_shared_processors() -> list[Processor]:
    """Get processors shared between stdlib and structlog."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _get_development_renderers() -> list[Processor]:
    return [
        structlog.dev.ConsoleRenderer(
            colors=False,
            exception_formatter=structlog.dev.plain_traceback,
        ),
    ]


def _get_production_renderers() -> list[Processor]:
    return [
        structlog.processors.dict_tracebacks,
        structlog.processors.JSONRenderer(),
    ]


def configure_logging(
    *,
    force_json: bool = False,
    level: int | None = None,
) -> None:
    """Configure structlog for the application.

    Subsequent calls reconfigure logging, replacing the root handler.

    Args:
        force_json: Force JSON output regardless of environment variable.
        level: Override log level. If None, reads from MUSTACHE_LOG_LEVEL.
    """
    use_json = force_json or _is_json_output()
    log_level = level if level is not None else _get_log_level()

    # Rendering happens once, in the root handler's formatter
    renderers = (
        _get_production_renderers() if use_json else _get_development_renderers()
    )

    structlog.configure(
        processors=[
            *_get_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *renderers,
            ],
            foreign_pre_chain=_get_shared_processors(),
        )
    )

    root_logger.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name. If None, uses the caller's module name.

    Returns:
        A bound structlog logger.

    Example:
        log = get_logger(__name__)
        log.debug("token_resolved", token="User.name", resolver="model")
    """
    log: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return log


def bind_context(**context: Any) -> None:
    """Bind context variables that will be included in all log messages.

    Args:
        **context: Key-value pairs to bind to log context.
    """
    structlog.contextvars.bind_contextvars(**context)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
