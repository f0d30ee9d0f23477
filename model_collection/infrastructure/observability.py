"""Structured Logging: JSON formatter and setup for library consumers.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (item_type, operation, item_count, key, error_code) surfaced when present
    - At most one handler installed by setup_logging, however often it is called

Design Decisions:
    - JSONFormatter built on stdlib json
    - Library code only calls logging.getLogger(__name__); the application
      decides whether to call setup_logging / configure_logging
"""

import json
import logging
from datetime import datetime, timezone

from model_collection.config import Settings, get_settings

_EXTRA_FIELDS = ("item_type", "operation", "item_count", "key", "error_code")
_HANDLER_NAME = "model_collection"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the root handler and set the root level."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


def configure_logging(settings: Settings | None = None) -> logging.Handler:
    """setup_logging driven by Settings (defaults to get_settings())."""
    settings = settings or get_settings()
    return setup_logging(settings.log_level, settings.log_format)
