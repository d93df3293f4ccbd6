"""Structured logging configuration."""

from __future__ import annotations

import logging
import sys
from typing import Any, ContextManager

import structlog
from structlog.types import Processor

from firebird_embedded.infrastructure.config import get_config


def setup_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """
    Set up structured logging with structlog.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); defaults to
            observability.log_level
        log_format: Log format ('json' or 'console'); defaults to
            observability.log_format
    """
    observability = get_config().observability
    level = level or observability.log_level
    log_format = log_format or observability.log_format

    numeric_level = getattr(logging, level.upper())
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def database_context(path: str, user: str) -> ContextManager[None]:
    """Attach the database path and owner to log lines inside the block.

    The previous context values are restored on exit.
    """
    return structlog.contextvars.bound_contextvars(db_path=path, db_user=user)


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """
    Get a bound logger instance.

    Args:
        name: Logger name (module name typically)
        **initial_context: Initial context to bind to the logger

    Returns:
        A bound structlog logger
    """
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
