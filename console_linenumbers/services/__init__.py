"""Line numbering services: segments, annotators, settings and streams."""

from .markup import TextSegment
from .annotator import (
    LINE_NUMBER_WIDTH,
    AnnotationResult,
    LineNumberAnnotator,
    format_line_number,
)
from .settings import GlobalSettings, SettingsError
from .factory import AnnotatorFactory
from .pipeline import ConsoleStream, annotate_lines

__all__ = [
    "TextSegment",
    "LINE_NUMBER_WIDTH",
    "AnnotationResult",
    "LineNumberAnnotator",
    "format_line_number",
    "GlobalSettings",
    "SettingsError",
    "AnnotatorFactory",
    "ConsoleStream",
    "annotate_lines",
]
