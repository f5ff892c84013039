# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Structured JSON logging, one JSON line per record.
Service loggers and uvicorn's own loggers share the same formatter so the
whole process writes a single stream format.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from timeoff_tracker.core.config import settings

# uvicorn.error carries startup/shutdown lines, uvicorn.access one line per request.
SERVER_LOGGERS: tuple[str, ...] = ("uvicorn", "uvicorn.error", "uvicorn.access")


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "service": settings.SERVICE_NAME,
            "logger": record.name,
            "message": record.getMessage(),
        }
        request_id = getattr(record, "request_id", None)
        if request_id:
            log_data["request_id"] = request_id
        if record.exc_info and record.exc_info[1]:
            log_data["error"] = str(record.exc_info[1])
            log_data["error_type"] = type(record.exc_info[1]).__name__
        return json.dumps(log_data, default=str)


def _attach_json_handler(logger: logging.Logger) -> logging.Logger:
    if not any(isinstance(h.formatter, JSONFormatter) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
        logger.handlers = [handler]
        logger.setLevel(settings.LOG_LEVEL)
        logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger writing JSON lines to stdout."""
    return _attach_json_handler(logging.getLogger(name or settings.SERVICE_NAME))


def configure_server_logging() -> None:
    """Replace uvicorn's plain-text handlers with the JSON one."""
    for name in SERVER_LOGGERS:
        _attach_json_handler(logging.getLogger(name))
