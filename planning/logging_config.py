"""
Structured JSON logging for the planning package.
"""
import json
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from planning.config import config

__all__ = [
    "StructuredFormatter",
    "get_logger",
    "configure_logging",
]

_LOGGER_PREFIX = "planning"

_STDLIB_KEYS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
) | {"message", "taskName"}


class StructuredFormatter(logging.Formatter):
    """Formats each log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Structured extra data
        for key, val in vars(record).items():
            if key not in _STDLIB_KEYS and key not in payload:
                payload[key] = val

        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            payload["exc_type"] = type(exc).__name__
            payload["exc_message"] = str(exc)
            payload["traceback"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the planning namespace."""
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")


def configure_logging(level: Optional[str] = None, stream=None) -> logging.Logger:
    """
    Attach a JSON handler to the package root logger.

    Safe to call more than once: existing handlers installed here are replaced.
    """
    root = logging.getLogger(_LOGGER_PREFIX)
    root.setLevel((level or config.log_level).upper())

    for handler in list(root.handlers):
        if getattr(handler, "_planning_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    handler._planning_handler = True
    root.addHandler(handler)
    return root
