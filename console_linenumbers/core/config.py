"""
Configuration management for console-linenumbers.
Centralizes all environment variables and settings.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}
LOG_FORMATS = ("text", "json")

DEFAULT_HOME = os.path.join("~", ".console-linenumbers")


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in _TRUE_VALUES


def _env_number(name: str, default: str, cast):
    """Parse a numeric variable; an unparsable value is kept as the raw string for validate()."""
    raw = os.environ.get(name, default)
    try:
        return cast(raw)
    except ValueError:
        return raw


# (field, environment variable, expected type)
_NUMERIC_FIELDS = (
    ("lock_timeout", "LINENUMBER_LOCK_TIMEOUT", (int, float)),
    ("log_max_bytes", "LINENUMBER_LOG_MAX_BYTES", int),
    ("log_backup_count", "LINENUMBER_LOG_BACKUP_COUNT", int),
)


@dataclass
class Config:
    """
    Process-wide configuration for console-linenumbers.

    All settings are loaded from environment variables with sensible defaults.
    Build one at startup with load_config() and hand it to whatever needs it.
    """

    # Version
    version: str = "1.2.0"

    # Global settings store
    settings_path: str = field(
        default_factory=lambda: os.path.expanduser(
            os.environ.get(
                "LINENUMBER_SETTINGS_FILE", os.path.join(DEFAULT_HOME, "settings.json")
            )
        )
    )
    default_enabled: bool = field(
        default_factory=lambda: _env_bool("LINENUMBER_ENABLED", "false")
    )
    lock_timeout: float = field(
        default_factory=lambda: _env_number("LINENUMBER_LOCK_TIMEOUT", "5.0", float)
    )

    # Logging
    log_format: str = field(
        default_factory=lambda: os.environ.get("LINENUMBER_LOG_FORMAT", "text").lower()
    )
    activity_log_enabled: bool = field(
        default_factory=lambda: _env_bool("LINENUMBER_ACTIVITY_LOG", "false")
    )
    log_dir: str = field(
        default_factory=lambda: os.path.expanduser(
            os.environ.get("LINENUMBER_LOG_DIR", DEFAULT_HOME)
        )
    )
    log_max_bytes: int = field(
        default_factory=lambda: _env_number("LINENUMBER_LOG_MAX_BYTES", str(10 * 1024 * 1024), int)
    )
    log_backup_count: int = field(
        default_factory=lambda: _env_number("LINENUMBER_LOG_BACKUP_COUNT", "5", int)
    )

    def validate(self) -> Optional[str]:
        """
        Validate configuration.

        Returns:
            Error message if invalid, None if valid.
        """
        for name, env_var, expected in _NUMERIC_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, expected):
                return f"{env_var} must be a number, got {value!r}"
        if self.log_format not in LOG_FORMATS:
            return f"Unknown log format {self.log_format!r} (expected one of: {', '.join(LOG_FORMATS)})"
        if self.lock_timeout <= 0:
            return "LINENUMBER_LOCK_TIMEOUT must be positive"
        return None


def load_config() -> Config:
    """Read a fresh Config from the current environment."""
    return Config()
