"""
Global line number settings.

Holds the single "enable line numbering" flag, loaded from a JSON file on
construction and written back whenever the configuration form is
submitted:

    {"enableLinenumber": true}

One GlobalSettings is created at startup and passed to the
AnnotatorFactory; nothing looks it up globally.
"""

import json
import threading
from typing import Any, Dict

from ..core.logging import log_warning
from ..core.storage import SafeFileWriter
from ..schemas.settings import LineNumberSettings, validate_settings_form

DISPLAY_NAME = "Enable Line number in Console log"


class SettingsError(ValueError):
    """Raised when settings cannot be validated or saved."""
    pass


class GlobalSettings:
    """Persisted on/off switch for console line numbers."""

    def __init__(self, path: str, default_enabled: bool = False, lock_timeout: float = 5.0):
        self.path = path
        self._writer = SafeFileWriter(lock_timeout=lock_timeout)
        self._lock = threading.Lock()
        # Serializes writers only; readers never wait on the disk
        self._write_lock = threading.Lock()
        self._settings = LineNumberSettings(enable_linenumber=default_enabled)
        self.load()

    @property
    def display_name(self) -> str:
        return DISPLAY_NAME

    @property
    def enable_linenumber(self) -> bool:
        with self._lock:
            return self._settings.enable_linenumber

    def load(self) -> None:
        """
        Read the settings file, keeping the current value if it is absent
        or unusable.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except FileNotFoundError:
            return
        except (OSError, ValueError) as e:
            log_warning(f"Could not read settings: {e}", path=self.path)
            return

        try:
            settings = validate_settings_form(document)
        except ValueError as e:
            log_warning(str(e), path=self.path)
            return

        with self._lock:
            self._settings = settings

    def configure(self, form_data: Dict[str, Any]) -> bool:
        """
        Apply submitted form data and persist it.

        Raises:
            SettingsError: If the form is invalid or cannot be saved
        """
        try:
            settings = validate_settings_form(form_data)
        except ValueError as e:
            raise SettingsError(str(e)) from e

        with self._write_lock:
            self._persist(settings)
            with self._lock:
                self._settings = settings
        return True

    def save(self) -> None:
        """
        Write the current settings to disk.

        Raises:
            SettingsError: If the write fails
        """
        with self._write_lock:
            with self._lock:
                current = self._settings
            self._persist(current)

    def _persist(self, settings: LineNumberSettings) -> None:
        content = json.dumps(settings.to_document(), indent=2) + "\n"
        result = self._writer.write(self.path, content)
        if not result.success:
            raise SettingsError(f"Could not save settings to {self.path}: {result.error}")

    def __repr__(self) -> str:
        return f"GlobalSettings(path={self.path!r}, enable_linenumber={self.enable_linenumber})"
