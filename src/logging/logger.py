# src/logging/logger.py — v2
"""Logger factory with JSON and text formatters.

Everything logs under the "skillsalary" namespace. Records emitted while a
job is processed carry its job_id and region (see logging/context.py).
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from skillsalary.logging.context import get_context

NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")


def _record_time(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=timezone.utc)


class JsonFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, logger, message[, context, data, exception]."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": _record_time(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = get_context().as_dict()
        if context:
            entry["context"] = context

        # logger.info(..., extra={"data": {...}})
        data = getattr(record, "data", None)
        if data:
            entry["data"] = data

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Single-line human-readable output, traceback appended below."""

    def format(self, record: logging.LogRecord) -> str:
        ctx = get_context()
        head = f"{_record_time(record):%Y-%m-%d %H:%M:%S} [{record.levelname:8s}] {record.name}"
        if ctx.job_id:
            head += f" [{ctx.job_id}]"
        if ctx.region:
            head += f" ({ctx.region})"
        line = f"{head} - {record.getMessage()}"
        if record.exc_info and record.exc_info[1] is not None:
            line += "\n" + self.formatException(record.exc_info)
        return line


_FORMATTERS: dict[str, type[logging.Formatter]] = {
    "json": JsonFormatter,
    "text": TextFormatter,
}


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package namespace. Configured by setup_logging()."""
    return logging.getLogger(f"skillsalary.{name}")


def setup_logging(
    level: str = "INFO",
    log_format: str = "json",
    log_file: str | None = None,
    rotation: str = "10MB",
    retention: int = 30,
) -> logging.Logger:
    """(Re)configure the package logger. Safe to call more than once.

    Args:
        level: DEBUG, INFO, WARNING or ERROR.
        log_format: "json" or "text".
        log_file: Optional file, size-rotated next to stderr output.
        rotation: Max file size before rotation (e.g. "10MB").
        retention: Number of rotated files to keep.

    Returns:
        The configured "skillsalary" logger.

    Raises:
        ValueError: On an unknown log_format or rotation size.
    """
    try:
        formatter = _FORMATTERS[log_format]()
    except KeyError:
        raise ValueError(f"Unsupported log format: {log_format!r}") from None

    package_logger = logging.getLogger("skillsalary")
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        from skillsalary.logging.handlers import create_rotating_handler

        handlers.append(create_rotating_handler(str(log_file), rotation, retention))

    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return package_logger
