"""Structured logging configuration.

This module initializes structlog with a stable JSON format on stderr.
Callers obtain loggers through ``get_logger`` and pass event fields
as keyword arguments.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL, SUPPORTED_LOG_LEVELS


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure structlog rendering and level filtering.

    Args:
        level: Minimum level name, one of ``SUPPORTED_LOG_LEVELS``.

    Raises:
        ValueError: If level name is not supported.
    """
    if level not in SUPPORTED_LOG_LEVELS:
        raise ValueError(
            f"Unsupported log level '{level}'. Use one of {SUPPORTED_LOG_LEVELS}."
        )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Applies the default configuration when nothing has configured
    structlog yet, so SDK callers get JSON on stderr without setup.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)
