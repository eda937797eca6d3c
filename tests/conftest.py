"""
Pytest configuration and fixtures for console-linenumbers tests.
"""

import pytest
import os
import sys
import shutil
import tempfile
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from console_linenumbers.core.config import Config
from console_linenumbers.core.logging import configure_logging


ENV_VARS = [
    "LINENUMBER_SETTINGS_FILE",
    "LINENUMBER_ENABLED",
    "LINENUMBER_LOCK_TIMEOUT",
    "LINENUMBER_LOG_FORMAT",
    "LINENUMBER_ACTIVITY_LOG",
    "LINENUMBER_LOG_DIR",
    "LINENUMBER_LOG_MAX_BYTES",
    "LINENUMBER_LOG_BACKUP_COUNT",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run every test without LINENUMBER_* variables and with text logging."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    configure_logging(Config(log_format="text", activity_log_enabled=False))
    yield
    configure_logging(Config(log_format="text", activity_log_enabled=False))


@pytest.fixture
def temp_dir():
    """Create temporary directory for test files."""
    path = tempfile.mkdtemp(prefix="linenumber_test_")
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def settings_path(temp_dir):
    """Path of a settings file that does not exist yet."""
    return os.path.join(temp_dir, "settings.json")


@pytest.fixture
def enabled_settings(settings_path):
    """GlobalSettings with line numbers switched on."""
    from console_linenumbers.services.settings import GlobalSettings

    settings = GlobalSettings(settings_path)
    settings.configure({"enableLinenumber": True})
    return settings


@pytest.fixture
def disabled_settings(settings_path):
    """GlobalSettings with line numbers switched off."""
    from console_linenumbers.services.settings import GlobalSettings

    settings = GlobalSettings(settings_path)
    settings.configure({"enableLinenumber": False})
    return settings


class FailingSegment:
    """Segment whose insert always raises."""

    def __init__(self, text: str = "", error: Exception = None):
        self.text = text
        self.error = error or RuntimeError("renderer unavailable")
        self.calls = 0

    def insert(self, offset, markup):
        self.calls += 1
        raise self.error


@pytest.fixture
def failing_segment():
    """A segment that cannot be written to."""
    return FailingSegment("broken line")
