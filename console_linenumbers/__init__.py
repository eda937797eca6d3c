"""
console-linenumbers v1.2.0
Sequential line numbers for build console output.

Features:
- Per-stream annotator with a right-aligned, five-column counter
- Global on/off switch persisted as a small JSON settings file
- Best-effort annotation: failures are logged, never raised
"""

__version__ = "1.2.0"

from .runner import main

__all__ = ["__version__", "main"]
