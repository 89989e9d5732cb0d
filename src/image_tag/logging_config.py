"""Logging configuration for the image tag service.

Provides structured logging with structlog. The ``text`` format renders
human-readable lines without timestamps; ``json`` renders one JSON object
per event with an ISO timestamp for log aggregation.
"""

import logging
import platform
import sys
from typing import Literal

import structlog

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["text", "json"]


def configure_logging(level: LogLevel = "INFO", log_format: LogFormat = "text") -> None:
    """Configure structured logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: "text" for console output or "json" for machine-readable output
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    # Standard library logging carries uvicorn's own records
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
        force=True,
    )

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]

    if log_format == "json":
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def log_version(version: str, build_date: str) -> None:
    """Log the application and runtime version banner."""
    logger = structlog.get_logger(__name__)
    logger.info("app", version=version, build_date=build_date)
    logger.info(
        "python",
        version=platform.python_version(),
        os=sys.platform,
        arch=platform.machine(),
    )
