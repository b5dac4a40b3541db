"""Structured logging infrastructure for the API layer.

Provides JSON-formatted logging for production and human-readable
logging for development, plus a GuidelinesLogger helper for compile events.
"""

import json
import logging
import sys
from datetime import datetime, timezone

# Extra record fields copied into JSON output when present
STRUCTURED_FIELDS = (
    "language",
    "child_age",
    "excluded_count",
    "included_count",
    "duration",
    "error_type",
)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in STRUCTURED_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging(json_format: bool = True, level: int = logging.INFO) -> None:
    """Configure structured logging for the application."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root_logger.addHandler(handler)


class GuidelinesLogger:
    """Logger for content guideline events with structured fields."""

    def __init__(self):
        self.logger = logging.getLogger("content_guidelines")

    def compiled(
        self,
        language: str,
        child_age: int,
        excluded_count: int,
        included_count: int,
        duration: float = None,
    ) -> None:
        extra = {
            "language": language,
            "child_age": child_age,
            "excluded_count": excluded_count,
            "included_count": included_count,
        }
        if duration:
            extra["duration"] = round(duration, 4)
        self.logger.info("Content guidelines compiled", extra=extra)

    def request_rejected(self, reason: str, error_type: str) -> None:
        self.logger.warning(
            f"Guidelines request rejected: {reason}",
            extra={"error_type": error_type},
        )


# Global guidelines logger instance
guidelines_logger = GuidelinesLogger()
