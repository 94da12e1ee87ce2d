"""Logging setup for event_facade.

Features:
- console handler on the "event_facade" logger
- JSON logs optional (easy ingestion)
- `facade` context field rendered when passed via `extra`
"""

from __future__ import annotations

import json
import logging
import sys
import time
from dataclasses import dataclass
from typing import Optional

from event_facade.settings import get_settings

LOGGER_NAME = "event_facade"

# ---------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------


class JsonFormatter(logging.Formatter):
    """Format log records as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "ts": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if hasattr(record, "facade"):
            base["facade"] = record.facade

        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(base, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Format log records as human-readable text."""

    def format(self, record: logging.LogRecord) -> str:
        parts = [record.levelname, record.name]

        facade = getattr(record, "facade", None)
        if facade:
            parts.append(f"[facade={facade}]")

        parts.append(record.getMessage())
        s = " ".join(parts)

        if record.exc_info:
            s += "\n" + self.formatException(record.exc_info)

        return s


# ---------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class LoggingOptions:
    """Configure logging behavior."""

    level: str = "INFO"
    json_logs: bool = False

    @classmethod
    def from_settings(cls) -> "LoggingOptions":
        settings = get_settings()
        return cls(level=settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)


def setup_logging(options: Optional[LoggingOptions] = None) -> logging.Logger:
    """
    Configure the package logger. Safe to call repeatedly.

    Args:
        options: Logging options, defaults to library settings

    Returns:
        The configured "event_facade" logger
    """
    options = options or LoggingOptions.from_settings()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, options.level.upper(), logging.INFO))
    logger.propagate = False

    # Replace handlers from earlier calls
    for h in list(logger.handlers):
        logger.removeHandler(h)

    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(logger.level)
    ch.setFormatter(JsonFormatter() if options.json_logs else TextFormatter())
    logger.addHandler(ch)

    return logger
