"""
Structured logging for console-linenumbers.
Supports both text and JSON formats for container observability.
"""

import os
import sys
import json
import logging
from datetime import datetime, timezone
from dataclasses import dataclass
from typing import Dict, Any, Optional
from logging.handlers import RotatingFileHandler

from .config import Config

LOGGER_NAME = "console_linenumbers"

logger = logging.getLogger(LOGGER_NAME)


@dataclass
class LogRecord:
    """Structured log record for JSON logging."""
    timestamp: str
    level: str
    event: str
    message: Optional[str]
    details: Dict[str, Any]


class StructuredLogger:
    """
    JSON-structured logger for production observability.

    Output format (one object per line on stderr):
    {"timestamp": "...", "level": "WARNING", "event": "annotation", ...}
    """

    def __init__(self, name: str = "console-linenumbers"):
        self.name = name

    def _emit(self, record: LogRecord):
        """Output log record as JSON to stderr."""
        output = {
            "timestamp": record.timestamp,
            "level": record.level,
            "logger": self.name,
            "event": record.event,
            "message": record.message,
            "details": {k: v if isinstance(v, (int, float, bool)) else str(v)
                        for k, v in record.details.items()} or None,
        }

        # Remove None values for cleaner output
        output = {k: v for k, v in output.items() if v is not None}

        print(json.dumps(output), file=sys.stderr, flush=True)

    def _log(self, level: str, event: str, message: str, details: Dict[str, Any]):
        self._emit(LogRecord(
            timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            level=level,
            event=event,
            message=message,
            details=details,
        ))

    def info(self, message: str, event: str = "info", **details):
        """Log info message."""
        self._log("INFO", event, message, details)

    def warning(self, message: str, event: str = "warning", **details):
        """Log warning message."""
        self._log("WARNING", event, message, details)

    def error(self, message: str, event: str = "error", **details):
        """Log error message."""
        self._log("ERROR", event, message, details)


# Global structured logger instance
structured_logger = StructuredLogger()

_log_format = "text"
_activity_handler: Optional[RotatingFileHandler] = None


def configure_logging(config: Config) -> None:
    """
    Apply the logging section of a Config.

    Safe to call more than once: the activity file handler is replaced,
    never stacked.
    """
    global _log_format, _activity_handler

    _log_format = config.log_format

    if _activity_handler is not None:
        logger.removeHandler(_activity_handler)
        _activity_handler.close()
        _activity_handler = None

    if not config.activity_log_enabled:
        return

    os.makedirs(config.log_dir, exist_ok=True)
    handler = RotatingFileHandler(
        os.path.join(config.log_dir, "activity.log"),
        maxBytes=config.log_max_bytes,
        backupCount=config.log_backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(handler)
    if logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)
    _activity_handler = handler


def log_warning(message: str, **details):
    """
    Record a recoverable problem.

    Args:
        message: Human readable description
        details: Extra key/value context (line number, path, ...)
    """
    if _log_format == "json":
        structured_logger.warning(message, **details)
        return

    if details:
        parts = [f"{k}={v}" for k, v in details.items()]
        message = f"{message} | {' | '.join(parts)}"
    logger.warning(message)


def log_progress(message: str, stage: str = "progress"):
    """
    Log progress messages to stderr.
    """
    if _log_format == "json":
        structured_logger.info(message, event=stage)
    else:
        print(f"[console-linenumbers] {message}", file=sys.stderr, flush=True)
