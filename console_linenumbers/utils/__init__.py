"""Utility functions."""

from .line_numbers import add_line_numbers, strip_line_numbers

__all__ = ["add_line_numbers", "strip_line_numbers"]
