"""Structured logging configuration using Python's standard logging.

This module configures logging with:
- JSON output for log aggregation (machine-readable)
- Console output for local runs (human-readable)
- Context binding for per-scenario or per-purchase fields
- Structlog integration for structured log entries

Log entries are diagnostics only. Customer-facing notices (shipping,
delivery, receipts) go to an output sink, not to the logger.

Usage:
    from quantumbooks.core.logging import configure_logging, get_logger

    # Configure once at startup
    configure_logging(settings)

    # Get a logger in any module
    logger = get_logger(__name__)
    logger.info("book_registered", isbn="P001", kind="physical")
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from quantumbooks.config import Settings


def add_app_context(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add application context to log entries."""
    event_dict["service"] = "quantumbooks"
    return event_dict


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structured logging for the application.

    Args:
        settings: Application settings. If None, uses default settings.
    """
    if settings is None:
        from quantumbooks.config import get_settings

        settings = get_settings()

    log_level = getattr(logging, settings.log_level.value, logging.INFO)

    # Shared processors for all formats
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        add_app_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.use_json_logs:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
        formatter = structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=shared_processors,
        )
    else:
        processors = [
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
        formatter = structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=False),
            foreign_pre_chain=shared_processors,
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Diagnostics go to stderr so stdout stays reserved for store notices
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.setLevel(log_level)
    root_logger.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        A bound structlog logger that outputs structured logs.

    Example:
        logger = get_logger(__name__)
        logger.info("purchase_completed", isbn="P001", total=240.0)
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> Any:
    """Context manager to bind values to all logs within the context.

    Example:
        with log_context(scenario="buy_physical"):
            logger.info("purchase_started")  # Includes scenario
    """
    return structlog.contextvars.bound_contextvars(**kwargs)
