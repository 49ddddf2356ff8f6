"""Logging configuration for pkgcurate.

Curation lookups run on worker threads, so every line names its thread.
Set CURATION_STRUCTURED_LOGGING to get one JSON object per line instead.
"""

import json
import logging
import os
import sys
from datetime import datetime
from typing import Any, Dict, Optional

LOGGER_NAME = "pkgcurate"
TEXT_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s [%(threadName)s] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "thread": record.threadName,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def _resolve_level(level: Optional[str]) -> int:
    resolved = logging.getLevelName((level or os.getenv("LOG_LEVEL") or "INFO").upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Optional[str] = None, structured: bool = False) -> logging.Logger:
    """
    Apply a level and output format to the pkgcurate logger's handlers.

    Args:
        level: Logging level name. Defaults to the LOG_LEVEL environment
            variable, or INFO.
        structured: Emit JSON lines instead of human-readable text

    Returns:
        The pkgcurate logger
    """
    log = logging.getLogger(LOGGER_NAME)
    log_level = _resolve_level(level)
    log.setLevel(log_level)
    for handler in log.handlers:
        handler.setLevel(log_level)
        handler.setFormatter(StructuredFormatter() if structured else logging.Formatter(TEXT_FORMAT, DATE_FORMAT))
    return log


def setup_logging(level: Optional[str] = None, structured: bool = False) -> logging.Logger:
    """Create the pkgcurate stderr handler once and configure it."""
    log = logging.getLogger(LOGGER_NAME)

    # Avoid duplicate handlers
    if log.handlers:
        return log

    log.addHandler(logging.StreamHandler(sys.stderr))
    return configure_logging(level, structured)


# Global logger instance
logger = setup_logging()
