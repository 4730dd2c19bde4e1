"""Structured Logging — JSON formatter, setup, and per-request access log.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (person_id, operation, method, path, status_code...) surfaced when present
    - JSON format in production, human-readable in development
    - Exactly one access-log line per HTTP request, written after the response status is known

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once on startup via lifespan; repeated calls replace
      the handler instead of stacking duplicates
    - Access log as Starlette BaseHTTPMiddleware: sees every route, including 404s
"""

import logging
import json
import time
from datetime import datetime, timezone

from starlette.middleware.base import BaseHTTPMiddleware

EXTRA_KEYS = (
    "person_id", "operation", "error_code", "method", "path",
    "status_code", "duration_ms", "field_count",
)

_HANDLER_NAME = "people_api"

access_logger = logging.getLogger("people_api.access")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every request."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # Unhandled errors are rendered by the outermost 500 handler
            _log_access(request, 500, started, level=logging.ERROR)
            raise
        _log_access(request, response.status_code, started)
        return response


def _log_access(request, status_code: int, started: float, level: int = logging.INFO):
    duration_ms = round((time.perf_counter() - started) * 1000, 2)
    access_logger.log(
        level,
        f"{request.method} {request.url.path} {status_code} {duration_ms}ms",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": duration_ms,
        },
    )
