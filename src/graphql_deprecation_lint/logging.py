"""Logging utilities for the deprecation lint rule.

This module provides standardized logging functionality for rule evaluation,
date validation, configuration loading and dispatch.
"""

import logging
from enum import Enum
from typing import Any

LOGGER_NAME = "graphql_deprecation_lint"


class LogLevel(int, Enum):
    """Log levels for the rule."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class LogEvent(str, Enum):
    """Event types for rule logging."""

    RULE_EVALUATION = "rule_evaluation"
    DATE_VALIDATION = "date_validation"
    CONFIGURATION = "configuration"
    DISPATCH = "dispatch"


def get_logger(name: str) -> logging.Logger:
    """Get a logger nested under the package logger.

    Args:
        name: Short name of the component (e.g. "rule")

    Returns:
        Logger named ``graphql_deprecation_lint.<name>``
    """
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


_package_logger = logging.getLogger(LOGGER_NAME)
_package_logger.addHandler(logging.NullHandler())


def _log(level: LogLevel, event: LogEvent, message: str, data: Any) -> None:
    """Log an event with structured data attached.

    Args:
        level: Severity level
        event: Event type
        message: Human readable message
        data: Dictionary of event data
    """
    if not _package_logger.isEnabledFor(level):
        return
    if data:
        details = ", ".join(f"{key}={value!r}" for key, value in sorted(data.items()))
        message = f"{message} ({details})"
    _package_logger.log(level, f"[{event.value}] {message}", extra={"event": event.value, "data": data})


def log_debug(event: LogEvent, message: str, **data: Any) -> None:
    """Log a debug-level event."""
    _log(LogLevel.DEBUG, event, message, data)


def log_info(event: LogEvent, message: str, **data: Any) -> None:
    """Log an info-level event."""
    _log(LogLevel.INFO, event, message, data)


def log_warning(event: LogEvent, message: str, **data: Any) -> None:
    """Log a warning-level event."""
    _log(LogLevel.WARNING, event, message, data)


def log_error(event: LogEvent, message: str, **data: Any) -> None:
    """Log an error-level event."""
    _log(LogLevel.ERROR, event, message, data)
