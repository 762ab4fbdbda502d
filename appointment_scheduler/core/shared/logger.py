"""
Shared Logger

Logging setup for the scheduling engine. Use cases and repositories log
through a ContextLogger so every record carries the appointment or staff
member it concerns; the JSON formatter emits that context under "extra".
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from appointment_scheduler.config.settings import Settings

LINE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JSONFormatter(logging.Formatter):
    """One JSON object per record; scheduling context goes under "extra"."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }

        context = getattr(record, "extra_data", None)
        if context:
            payload["extra"] = context

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Copy so other handlers see the plain level name
        colored = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(record.levelname, self.RESET)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


class ContextLogger:
    """
    Wraps a stdlib logger and attaches a fixed context to every record.

    Keyword arguments given to a log call are merged over the bound
    context, e.g. ``logger.with_context(appointment_id=apt.id).info("Cancelled")``.
    """

    def __init__(self, name: str, context: dict[str, Any] | None = None):
        self._logger = logging.getLogger(name)
        self._context = dict(context or {})

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._context)

    def with_context(self, **kwargs) -> "ContextLogger":
        """Return a logger bound to additional context (appointment_id, staff_id, ...)."""
        return ContextLogger(self._logger.name, {**self._context, **kwargs})

    def _log(self, level: int, message: str, exc_info: bool = False, **kwargs) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, message, exc_info=exc_info, extra={"extra_data": {**self._context, **kwargs}})

    def debug(self, message: str, **kwargs) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        self._log(logging.ERROR, message, exc_info=True, **kwargs)


def _build_formatter(format_type: str) -> logging.Formatter:
    if format_type == "json":
        return JSONFormatter()
    if format_type == "colored":
        return ColoredFormatter(LINE_FORMAT, datefmt=DATE_FORMAT)
    return logging.Formatter(LINE_FORMAT, datefmt=DATE_FORMAT)


def configure_logging(
    level: str = "INFO",
    format_type: str = "colored",
    log_file: str | None = None,
) -> None:
    """
    Replace the root handlers with a console handler (and an optional JSON file handler).

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: 'colored', 'json' or 'plain'
        log_file: Optional path; file output is always JSON
    """
    numeric_level = logging.getLevelName(level.upper())
    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(_build_formatter(format_type))
    root.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JSONFormatter())
        root.addHandler(file_handler)


def configure_logging_from_settings(settings: "Settings") -> None:
    """Configure logging from LOG_LEVEL / LOG_FORMAT / LOG_FILE."""
    configure_logging(
        level=settings.LOG_LEVEL,
        format_type=settings.LOG_FORMAT,
        log_file=settings.LOG_FILE,
    )


def get_use_case_logger(operation: str) -> ContextLogger:
    """Logger for an application use case, tagged with the operation name."""
    return ContextLogger(f"use_case.{operation}", {"component": "use_case", "operation": operation})


def get_repository_logger(repo_name: str) -> ContextLogger:
    """Logger for a persistence adapter, tagged with the repository name."""
    return ContextLogger(f"repository.{repo_name}", {"component": "repository", "repository": repo_name})
