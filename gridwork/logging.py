"""Custom logging formatters and request-context binding."""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

# Fields that are part of the standard LogRecord, not user-provided extras
RESERVED_LOG_ATTRS = frozenset(
    [
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "thread",
        "threadName",
        "taskName",
    ]
)

# Request-scoped fields (request_id, user_id, path, ...) attached to every record
_log_context: contextvars.ContextVar[Mapping[str, Any] | None] = contextvars.ContextVar(
    "log_context", default=None
)


def bind_log_context(**context: Any) -> contextvars.Token:
    """Bind contextual fields for the current request."""
    filtered = {k: v for k, v in context.items() if v not in {None, ""}}
    return _log_context.set(filtered)


def reset_log_context(token: contextvars.Token) -> None:
    """Reset contextual fields after a request completes."""
    with contextlib.suppress(ValueError):
        _log_context.reset(token)


def current_log_context() -> dict[str, Any]:
    """Return a copy of the current contextual fields."""
    context = _log_context.get({}) or {}
    return dict(context)


class RequestContextFilter(logging.Filter):
    """Attach contextvar fields (request_id, user_id, path, etc.) to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = _log_context.get(None) or {}
        for key, value in context.items():
            setattr(record, key, value)
        return True


def _get_extra_fields(record: logging.LogRecord) -> dict:
    """Extract extra fields from a log record."""
    extras = {}
    for key, value in record.__dict__.items():
        if key not in RESERVED_LOG_ATTRS and not key.startswith("_"):
            extras[key] = value
    return extras


class JsonFormatter(logging.Formatter):
    """Format log records as one JSON object per line.

    Extra fields passed to logger calls are included as top-level keys.
    Values that cannot be serialized are rendered with ``str()``.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in _get_extra_fields(record).items():
            try:
                json.dumps(value)
                log_data[key] = value
            except (TypeError, ValueError):
                log_data[key] = str(value)

        return json.dumps(log_data)


class DevFormatter(logging.Formatter):
    """Human-readable formatter for development that includes extra fields.

    Format: timestamp LEVEL    logger message | key=value key2=value2
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        base = f"{timestamp} {record.levelname:8} {record.name} {record.getMessage()}"

        extras = _get_extra_fields(record)
        if extras:
            extra_str = " ".join(f"{k}={v!r}" for k, v in extras.items())
            base = f"{base} | {extra_str}"

        if record.exc_info:
            base = f"{base}\n{self.formatException(record.exc_info)}"

        return base
