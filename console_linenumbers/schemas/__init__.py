"""Pydantic schemas for the global configuration form."""

from .settings import LineNumberSettings, validate_settings_form

__all__ = [
    "LineNumberSettings",
    "validate_settings_form",
]
