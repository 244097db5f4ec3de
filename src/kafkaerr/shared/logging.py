"""Structured logging for kafkaerr.

Helpers that set up a logger emitting either Rich console output or one JSON
object per record, and that record error values with their code and flags.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from kafkaerr.config import LoggingSettings
from kafkaerr.shared.constants import Application, Logging
from kafkaerr.shared.errors import KafkaError, KafkaErrorFault

# Extra record attributes copied into the JSON output when present
_EXTRA_FIELDS = (
    "error_code",
    "error_name",
    "fatal",
    "txn_abortable",
    "operation",
    "context",
)


class StructuredFormatter(logging.Formatter):
    """Formatter that renders each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created,
                tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in _EXTRA_FIELDS:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def _create_rich_console() -> Console:
    """Create the themed Rich console used for log output."""
    custom_theme = Theme(
        {
            "logging.level.debug": "cyan",
            "logging.level.info": "green",
            "logging.level.warning": "yellow",
            "logging.level.error": "red bold",
            "logging.level.critical": "red bold reverse",
            "log.time": "dim cyan",
            "log.message": "white",
            "log.path": "dim blue",
        }
    )
    return Console(theme=custom_theme, stderr=True)


def setup_structured_logger(
    name: str = Application.NAME,
    level: str = Logging.DEFAULT_LEVEL,
    log_file: str | None = None,
    *,
    console_output: bool = True,
    use_rich_console: bool = True,
) -> logging.Logger:
    """Configure a logger for structured output.

    Existing handlers on the logger are replaced, so calling this twice does
    not duplicate output.

    Args:
        name: Logger name (default: the package logger)
        level: Log level name
        log_file: Optional path of a JSON-lines log file
        console_output: Attach a console handler
        use_rich_console: Use Rich output on the console instead of JSON lines

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        logger.handlers.clear()

    log_level = getattr(logging, level.upper())
    logger.setLevel(log_level)

    if console_output:
        if use_rich_console:
            handler: logging.Handler = RichHandler(
                console=_create_rich_console(),
                show_time=True,
                show_level=True,
                show_path=True,
                markup=False,
                rich_tracebacks=True,
                tracebacks_show_locals=False,
                log_time_format=Logging.TIME_FORMAT,
            )
        else:
            handler = logging.StreamHandler()
            handler.setFormatter(StructuredFormatter())
        handler.setLevel(log_level)
        logger.addHandler(handler)

    # File output is always JSON
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def setup_from_settings(
    settings: LoggingSettings,
    name: str = Application.NAME,
) -> logging.Logger:
    """Configure the package logger from LoggingSettings."""
    return setup_structured_logger(
        name,
        settings.level,
        settings.file,
        console_output=settings.console_output,
        use_rich_console=settings.rich_console,
    )


def log_error_value(
    logger: logging.Logger,
    error: KafkaError,
    operation: str | None = None,
    context: dict[str, Any] | None = None,
) -> None:
    """Log a live error value without consuming it.

    Fatal errors are logged at ERROR, everything else at WARNING.

    Args:
        logger: Logger instance
        error: Error value to record; must not be consumed
        operation: Operation that produced the error
        context: Extra context merged into the record
    """
    fatal = error.is_fatal()
    logger.log(
        logging.ERROR if fatal else logging.WARNING,
        "%s: %s",
        error.name,
        error.message,
        extra={
            "error_code": int(error.code),
            "error_name": error.name,
            "fatal": fatal,
            "txn_abortable": error.is_txn_abortable(),
            "operation": operation,
            "context": context or {},
        },
    )


def log_fault(
    logger: logging.Logger,
    fault: KafkaErrorFault,
    operation: str | None = None,
) -> None:
    """Log a package fault with its structured context."""
    logger.error(
        fault.message,
        extra={
            "error_code": fault.code.value,
            "operation": operation or fault.context.operation,
            "context": fault.context.safe_dict(),
        },
        exc_info=fault if fault.__cause__ is not None else None,
    )


__all__ = [
    "StructuredFormatter",
    "log_error_value",
    "log_fault",
    "setup_from_settings",
    "setup_structured_logger",
]
