"""Structured logging utility for the legal parser."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional

from ..config.settings import settings

_RESERVED_ATTRS = {
    "name", "msg", "args", "levelname", "levelno", "pathname",
    "filename", "module", "exc_info", "exc_text", "stack_info",
    "lineno", "funcName", "created", "msecs", "relativeCreated",
    "thread", "threadName", "processName", "process", "getMessage",
    "taskName", "message", "asctime",
}


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured JSON logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""

        # Base log data
        log_data = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields from record
        extra_fields = {
            k: v for k, v in record.__dict__.items()
            if k not in _RESERVED_ATTRS
        }

        if extra_fields:
            log_data["extra"] = extra_fields

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(
    level: Optional[str] = None,
    structured: bool = True,
    include_console: bool = True
) -> None:
    """
    Set up application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        structured: Whether to use structured JSON logging
        include_console: Whether to include console output
    """
    log_level = level or settings.log_level

    # Convert string level to logging constant
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.setLevel(numeric_level)

    if include_console:
        # stderr keeps stdout free for the JSON document
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(numeric_level)

        if structured:
            console_handler.setFormatter(StructuredFormatter())
        else:
            # Human-readable format for development
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            console_handler.setFormatter(formatter)

        root_logger.addHandler(console_handler)

    # Suppress noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with consistent configuration.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def log_timing(operation: str, duration_ms: float, **context) -> Dict[str, Any]:
    """
    Create structured log data for timing information.

    Args:
        operation: Name of the operation
        duration_ms: Duration in milliseconds
        **context: Additional context

    Returns:
        Dictionary of log data
    """
    return {
        "event": "timing",
        "operation": operation,
        "duration_ms": duration_ms,
        **context
    }


def log_error(error: BaseException, **context) -> Dict[str, Any]:
    """
    Create structured log data for errors.

    Args:
        error: Exception instance
        **context: Additional context

    Returns:
        Dictionary of log data
    """
    return {
        "event": "error",
        "error_type": type(error).__name__,
        "error_message": str(error),
        **context
    }
