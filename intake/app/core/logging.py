"""Structured JSON logging for the intake pipeline.

Call sites attach context with ``extra={"extra_fields": {...}}``. Contact
details never reach the output: any of ``CONTACT_FIELDS`` found in the
context is replaced with ``[REDACTED]``.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from intake.app.core.config import settings


CONTACT_FIELDS = frozenset({"name", "email", "phone", "message"})

_REDACTED = "[REDACTED]"


def redact_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Return ``fields`` with reservation contact details masked."""
    return {
        key: _REDACTED if key in CONTACT_FIELDS and value is not None else value
        for key, value in fields.items()
    }


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields = getattr(record, "extra_fields", None)
        if extra_fields:
            log_obj.update(redact_fields(extra_fields))

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger configured for JSON output at ``settings.LOG_LEVEL``."""
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
        logger.setLevel(settings.LOG_LEVEL.upper())
        logger.propagate = False

    return logger
