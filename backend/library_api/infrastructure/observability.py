"""Structured Logging — formatters, logger setup and the HTTP access log.

Invariants:
    - Every record carries timestamp, level, logger name and message
    - Known extras (LOG_EXTRA_KEYS) are rendered by both formats; unknown ones are not
    - setup_logging() is idempotent: calling it again replaces, never stacks, its handler
    - One access line per HTTP request: method, path, status_code, duration_ms

Design Decisions:
    - JSON for production (one object per line), key=value text for local runs
    - Timestamps from record.created, not format time, so buffered records keep their time
    - uvicorn.access is silenced in favor of log_requests, which carries the
      same fields as structured extras; sqlalchemy.engine stays at WARNING
      unless the app level is DEBUG
"""

import json
import logging
import time
from datetime import datetime, timezone

from fastapi import Request

LOG_EXTRA_KEYS = (
    "method", "path", "status_code", "duration_ms",
    "author_id", "book_id", "error_code", "violation_count",
)

_HANDLER_NAME = "library_api"

access_logger = logging.getLogger("library_api.access")


def _extras(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in LOG_EXTRA_KEYS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_extras(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class KeyValueFormatter(logging.Formatter):
    """Human-readable line followed by key=value extras."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _extras(record)
        if not extras:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in extras.items())
        head, sep, tail = line.partition("\n")
        return f"{head} {pairs}{sep}{tail}"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the app handler on the root logger, replacing any earlier one."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else KeyValueFormatter())
    root.addHandler(handler)

    root_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(root_level)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if root_level <= logging.DEBUG else logging.WARNING,
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return handler


async def log_requests(request: Request, call_next):
    """HTTP middleware: time the request and emit one access record."""
    started = time.perf_counter()
    response = await call_next(request)
    duration_ms = round((time.perf_counter() - started) * 1000, 2)
    access_logger.info(
        f"{request.method} {request.url.path} {response.status_code}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response
