"""Structured JSON logging for langdesk.

Provides a JSON formatter that outputs one JSON object per line to
stdout.  Extra fields (``translator``, ``language``, ``event``, etc.)
passed via ``extra=`` are merged into each log record automatically.

Usage::

    from langdesk.core.logging import setup_logging
    setup_logging("INFO")
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "event",
    "translator",
    "language",
    "section",
    "record_count",
)


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in _EXTRA_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value

        if record.exc_info and record.exc_info[1] is not None:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(log_level: str = "INFO", *, logger_name: str = "langdesk") -> logging.Logger:
    """Route the ``langdesk`` logger tree to stdout as JSON lines.

    Only the library's own logger is touched so host applications keep
    control of the root logger.

    Args:
        log_level: Minimum log level name (e.g. ``"INFO"``, ``"DEBUG"``).
        logger_name: Logger to configure.

    Returns:
        The configured logger.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())

    logger = logging.getLogger(logger_name)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(log_level.upper())
    logger.propagate = False
    return logger
