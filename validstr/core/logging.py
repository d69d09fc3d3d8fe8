"""Logging and observability configuration using Pydantic Logfire.

All modules should use Python's standard logging library (logging.getLogger(__name__)),
and Logfire will pick up and enrich these logs once configured.

Standard usage:
    import logging
    logger = logging.getLogger(__name__)
    logger.info("validation_no_match", extra={"candidate": "xyz"})

Structured logging utilities:
    log_with_context(logger, "debug", "Message", candidate="r", matches=1)
"""

import logging

import logfire
from fastapi import FastAPI

from validstr.core.config import settings


def configure_logfire() -> None:
    """Configure Pydantic Logfire with token from environment.

    Nothing is sent unless LOGFIRE_TOKEN is set.
    """
    logfire.configure(
        token=settings.logfire_token,
        service_name=settings.service_name,
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire="if-token-present",
    )

    logger = logging.getLogger(__name__)
    logger.info("Logfire configured successfully")


def instrument_fastapi(app: FastAPI) -> None:
    """Add Logfire instrumentation to FastAPI application."""
    logfire.instrument_fastapi(app)
    logger = logging.getLogger(__name__)
    logger.info("FastAPI instrumentation configured")


def span(name: str) -> logfire.LogfireSpan:
    """Create a custom span for service layer functions.

    Usage:
        with span("string_validator.validate"):
            ...
    """
    return logfire.span(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: object,
) -> None:
    """Log a message with structured context fields.

    Args:
        logger: Logger instance to use
        level: Log level ("debug", "info", "warning", "error", "critical")
        message: Log message
        **context: Additional context fields (candidate, function_name, position, etc.)

    Usage:
        log_with_context(logger, "info", "validation_expanded", candidate="r", value="red")
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=context)
