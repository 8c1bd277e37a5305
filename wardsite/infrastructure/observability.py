"""Structured Logging — JSON formatter and setup for the Ward Site API.

Invariants:
    - Every record carries timestamp, level, logger name and message
    - Calendar context (auxiliary, month, event_id, post_id) and request
      context (path, error_code) are surfaced only when set
    - setup_logging is idempotent: re-running the lifespan replaces the
      Ward Site handler instead of stacking a second one
    - SQLAlchemy engine and driver chatter stays at WARNING or above

Design Decisions:
    - setup_logging called once on startup via lifespan
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "wardsite"

CONTEXT_FIELDS = ("auxiliary", "month", "event_id", "post_id")
REQUEST_FIELDS = ("path", "error_code")

QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg")

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per line; dates in extras serialize as ISO strings."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in CONTEXT_FIELDS + REQUEST_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the Ward Site handler on the root logger and return it."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT)
    )
    root.addHandler(handler)

    root_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(root_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(root_level, logging.WARNING))
    return handler
