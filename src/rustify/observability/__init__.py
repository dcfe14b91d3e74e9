"""Observability: structured logging.

Example:
    >>> from rustify.observability import configure_logging, get_logger
    >>> configure_logging(format="json", level="DEBUG")
    >>> get_logger("app").debug("ready")
"""

from .logging import (
    BoundLogger,
    ConsoleRenderer,
    JsonRenderer,
    LogEntry,
    LogRenderer,
    LogScope,
    NoOpRenderer,
    configure_logging,
    get_logger,
    reset_logging,
)

__all__ = [
    "BoundLogger", "LogEntry", "LogScope",
    "LogRenderer", "ConsoleRenderer", "JsonRenderer", "NoOpRenderer",
    "configure_logging", "get_logger", "reset_logging",
]
