"""Structured Logging: JSON formatter and setup for the mock service.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Request fields (method, route, status_code, error_code) surfaced when present
    - setup_logging is idempotent: calling it twice never duplicates output

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - Uvicorn loggers propagate to root so server and handler lines share one format
"""

import json
import logging
from datetime import datetime, timezone

REQUEST_FIELDS = ("method", "route", "status_code", "error_code")
_HANDLER_NAME = "datadip_mock"


class JSONFormatter(logging.Formatter):
    """One JSON object per line; request fields only when the caller passed them."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        log = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key]
            for key in REQUEST_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure root logging for the application."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.propagate = True
