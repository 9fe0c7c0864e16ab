"""
Centralized Logging Configuration for fed-analogues

Structured logging built on the standard library ``logging`` package. The
analysis modules only ever call ``logging.getLogger(__name__)``; handlers and
formatters are installed once by the calling application through
``setup_logging`` (or ``configure_from_settings``).

Usage:
    from fedanalogues.core.logging_config import setup_logging, get_logger

    setup_logging(log_level="DEBUG")
    logger = get_logger(__name__)
    logger.info("Candidates scored", extra={"windows": 640, "indicators": 2})
"""

import json
import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

# LogRecord attributes that are never treated as user-supplied context
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
        "extra_fields",
        "getMessage",
        "asctime",
    }
)


def _context_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Collect the fields attached to a record through ``extra=``."""
    fields: dict[str, Any] = {}
    if hasattr(record, "extra_fields"):
        fields.update(record.extra_fields)
    for key, value in record.__dict__.items():
        if key not in _RESERVED_ATTRS:
            fields[key] = value
    return fields


class StructuredFormatter(logging.Formatter):
    """
    Formatter that renders each record as a single JSON object.

    Context passed through ``extra={...}`` is merged into the top level of the
    object so that a log aggregator can filter on e.g. ``indicator`` or
    ``rejected_windows`` directly.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data.update(_context_fields(record))

        # Dates and enums show up in context; fall back to str() for them
        return json.dumps(log_data, default=str)


class HumanReadableFormatter(logging.Formatter):
    """
    Formatter for console output: ``timestamp [LEVEL] logger - message | k=v``.

    ANSI colors are used only when requested and stdout is a terminal.
    """

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
        "RESET": "\033[0m",
    }

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, UTC).strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname

        if self.use_colors:
            level_str = f"{self.COLORS.get(level, '')}{level:8s}{self.COLORS['RESET']}"
        else:
            level_str = f"{level:8s}"

        message = f"{timestamp} [{level_str}] {record.name} - {record.getMessage()}"

        context = _context_fields(record)
        if context:
            message += " | " + " ".join(f"{key}={value}" for key, value in context.items())

        if record.exc_info:
            message += f"\n{self.formatException(record.exc_info)}"

        return message


def setup_logging(
    log_level: str = "INFO",
    log_file: str | None = None,
    log_dir: str | None = None,
    json_format: bool = False,
    console_output: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure root logging for an application embedding the engine.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (optional). If log_dir is also provided,
                 log_file is treated as filename only.
        log_dir: Directory for log files (optional)
        json_format: If True, use JSON structured format for file output
        console_output: If True, add console (stdout) handler
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of backup log files to keep

    Raises:
        ValueError: If log_level is invalid
    """
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level}")

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(HumanReadableFormatter(use_colors=True))
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_dir) / log_file if log_dir else Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            str(log_path),
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        file_handler.setLevel(numeric_level)
        if json_format:
            file_handler.setFormatter(StructuredFormatter())
        else:
            file_handler.setFormatter(HumanReadableFormatter(use_colors=False))
        root_logger.addHandler(file_handler)


def configure_from_settings(settings=None) -> None:
    """Apply ``setup_logging`` using the values held in :class:`Settings`."""
    if settings is None:
        from fedanalogues.core.config import get_settings

        settings = get_settings()

    setup_logging(
        log_level=settings.log_level,
        log_file=settings.log_file or None,
        json_format=settings.log_json,
    )


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (typically the calling module's ``__name__``)."""
    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: str, message: str, **context: Any) -> None:
    """
    Log a message with structured context.

    Example:
        log_with_context(logger, "info", "Analogue selected",
                         start="2005-01-01", score=0.42)
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=context)
