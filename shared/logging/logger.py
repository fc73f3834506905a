"""
Structured JSON logging for the console services.

Each entry carries the service name and goes to stdout as one JSON line.
Credentials must never reach a log record: callers log provider labels,
models and masked error details only. The HTTP client loggers are kept
above INFO, and `QueryKeyFilter` scrubs the `key` query parameter (the
Gemini credential) from any request line that still gets through.
"""

from __future__ import annotations

import json
import logging
import os
import re
import sys
from datetime import datetime, timezone
from typing import Any

_QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")

_QUERY_KEY = re.compile(r"([?&]key=)[^&\s\"']+")


def redact_query_key(text: str) -> str:
    return _QUERY_KEY.sub(r"\1****", text)


class QueryKeyFilter(logging.Filter):
    """Rewrites a record so no `key=<value>` query parameter survives formatting."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_query_key(message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


def install_query_key_filter(logger_name: str = "httpx") -> None:
    """Attach a QueryKeyFilter to `logger_name` once."""
    target = logging.getLogger(logger_name)
    if not any(isinstance(f, QueryKeyFilter) for f in target.filters):
        target.addFilter(QueryKeyFilter())


class JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects, `key=` values redacted."""

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service = service_name

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": self._service,
            "logger": record.name,
            "message": redact_query_key(record.getMessage()),
        }

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = redact_query_key(self.formatException(record.exc_info))

        extra = getattr(record, "_extra", None)
        if extra:
            entry["extra"] = extra

        return json.dumps(entry, default=str)


def setup_logging(service_name: str, level_name: str | None = None) -> logging.Logger:
    """
    Configure the root logger for a service with JSON output to stdout.

    Call once at service startup (in the lifespan hook). `level_name`
    falls back to LOG_LEVEL, then INFO.
    """
    level_name = (level_name or os.environ.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter(service_name))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for noisy in _QUIET_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logger = logging.getLogger(service_name)
    logger.info("Logging initialized", extra={"_extra": {"level": level_name}})
    return logger
