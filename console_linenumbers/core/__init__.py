"""Core modules: config, logging, storage."""

from .config import Config, load_config
from .logging import (
    StructuredLogger,
    structured_logger,
    configure_logging,
    log_warning,
    log_progress,
    logger,
)
from .storage import (
    SafeFileWriter,
    WriteResult,
    FileLockError,
    file_lock,
)

__all__ = [
    "Config",
    "load_config",
    "StructuredLogger",
    "structured_logger",
    "configure_logging",
    "log_warning",
    "log_progress",
    "logger",
    "SafeFileWriter",
    "WriteResult",
    "FileLockError",
    "file_lock",
]
