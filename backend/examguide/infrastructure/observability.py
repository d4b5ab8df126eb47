"""Structured Logging: one root handler, JSON lines in production, plain text in development.

Invariants:
    - Every JSON line carries timestamp, level, logger and message
    - Only the exam-related extras listed in LOG_EXTRAS are copied from a record
    - setup_logging is idempotent: the handler it installs replaces any earlier one
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "examguide"
LOG_EXTRAS = (
    "exam_name", "error_code", "path", "was_created",
    "processed_count", "inserted_count",
)
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """Render a record as a single JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, getattr(record, key))
            for key in LOG_EXTRAS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or reinstall) the application handler on the root logger."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
