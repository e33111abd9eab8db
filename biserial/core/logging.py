"""
biserial.core.logging
=====================

Structured logging for the package.

The library never configures logging on import; applications call
`configure_logging` once at startup and modules obtain loggers with
`get_logger(__name__)`.

Examples
--------
>>> from biserial.core.logging import configure_logging, get_logger
>>> configure_logging(log_level="WARNING", log_format="json")
>>> logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, cast

import structlog
from structlog.typing import FilteringBoundLogger

from biserial.core.errors import InvalidArgumentError

LOG_FORMATS = ("console", "json")


def configure_logging(
    log_level: str = "INFO",
    log_format: str = "console",
    show_timestamps: bool = True,
    color: bool = True,
) -> None:
    """Configure structlog for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: "console" for development, "json" for machine consumption
        show_timestamps: Whether to prepend ISO timestamps
        color: Whether to use colors in console mode
    """
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise InvalidArgumentError(f"Unknown log level: {log_level}")
    if log_format not in LOG_FORMATS:
        raise InvalidArgumentError(
            f"log_format must be 'console' or 'json', got {log_format}"
        )

    shared_processors: List[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if show_timestamps:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso", utc=True))

    if log_format == "json":
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(
                colors=color,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> FilteringBoundLogger:
    """Get a structured logger (typically `get_logger(__name__)`)."""
    return cast(FilteringBoundLogger, structlog.get_logger(name))
