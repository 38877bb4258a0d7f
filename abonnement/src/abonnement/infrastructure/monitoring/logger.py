"""
Structured JSON logging configuration.
"""

import json
import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator, Optional
from uuid import uuid4

# Context variable for operation ID tracking
operation_id_ctx: ContextVar[Optional[str]] = ContextVar("operation_id", default=None)

# Attributes every LogRecord carries; anything else came from `extra`
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs logs in JSON format with consistent schema.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string
        """
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add operation ID if available
        operation_id = operation_id_ctx.get()
        if operation_id:
            log_data["operation_id"] = operation_id

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields from record
        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_data[key] = value

        log_data["file"] = record.pathname
        log_data["line"] = record.lineno
        log_data["function"] = record.funcName

        return json.dumps(log_data, default=str)


def setup_logging(level: str = "INFO", json_logs: bool = True) -> None:
    """
    Configure application logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_logs: Use JSON format (True) or plain text (False)
    """
    # Get root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    root_logger.handlers.clear()

    # Create console handler
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level.upper()))

    # Set formatter
    if json_logs:
        formatter = JSONFormatter(datefmt="%Y-%m-%dT%H:%M:%S")
    else:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get logger with given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def set_operation_id(operation_id: Optional[str] = None) -> str:
    """
    Set operation ID for current context.

    Args:
        operation_id: Operation ID (generates UUID if None)

    Returns:
        Operation ID that was set
    """
    if operation_id is None:
        operation_id = str(uuid4())
    operation_id_ctx.set(operation_id)
    return operation_id


def get_operation_id() -> Optional[str]:
    """
    Get operation ID from current context.

    Returns:
        Operation ID or None
    """
    return operation_id_ctx.get()


@contextmanager
def operation_context(operation_id: Optional[str] = None) -> Iterator[str]:
    """
    Scope log lines to one operation ID.

    Keeps the current operation ID when one is already set, otherwise
    generates one. The previous value is restored on exit.

    Args:
        operation_id: Explicit operation ID (current or new UUID if None)

    Yields:
        Operation ID active inside the block
    """
    operation_id = operation_id or operation_id_ctx.get() or str(uuid4())
    token = operation_id_ctx.set(operation_id)
    try:
        yield operation_id
    finally:
        operation_id_ctx.reset(token)
