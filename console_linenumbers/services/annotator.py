"""
Line number annotator for console output streams.

Each output stream gets its own LineNumberAnnotator. When enabled, every
line is prefixed with its 1-based number right-aligned in a five column
field plus one space:

        1 build start
        2
        3 step 2

Annotation is best effort. A failing line is logged and reported in the
returned AnnotationResult; the stream keeps going.
"""

from dataclasses import dataclass
from typing import Any, Optional

from ..core.logging import log_warning

LINE_NUMBER_WIDTH = 5


def format_line_number(number: int, width: int = LINE_NUMBER_WIDTH) -> str:
    """
    Format a line number prefix.

    The field is right-aligned and grows past width instead of truncating.

    Args:
        number: Line number to render
        width: Minimum field width (default 5)

    Returns:
        The prefix, e.g. "   42 "
    """
    return f"{number:>{width}} "


@dataclass
class AnnotationResult:
    """Outcome of annotating one line."""
    annotator: "LineNumberAnnotator"  # continuation for the next line
    line_number: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def applied(self) -> bool:
        """True if a prefix was inserted."""
        return self.line_number is not None and self.error is None


class LineNumberAnnotator:
    """
    Stateful per-stream annotator.

    The enabled flag is captured at construction and never changes; a new
    configuration value only applies to annotators created afterwards.
    """

    def __init__(self, enabled: bool):
        self._enabled = bool(enabled)
        self._line_number = 0

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def line_number(self) -> int:
        """Number assigned to the most recent line (0 before the first)."""
        return self._line_number

    def annotate(self, segment, context: Any = None) -> AnnotationResult:
        """
        Prefix one line with its number.

        Args:
            segment: Object with an insert(offset, text) method (see TextSegment)
            context: Opaque value threaded through by the caller, unused

        Returns:
            AnnotationResult; never raises
        """
        if not self._enabled:
            return AnnotationResult(self)

        self._line_number += 1
        number = self._line_number
        try:
            segment.insert(0, format_line_number(number))
        except Exception as e:
            log_warning(f"annotation is fail : {e!r}", line_number=number)
            return AnnotationResult(self, number, str(e) or type(e).__name__)

        return AnnotationResult(self, number)

    def __repr__(self) -> str:
        return f"LineNumberAnnotator(enabled={self._enabled}, line_number={self._line_number})"
