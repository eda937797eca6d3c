"""Factory handing out one LineNumberAnnotator per output stream."""

from typing import Any

from .annotator import LineNumberAnnotator


class AnnotatorFactory:
    """
    Creates annotators from the current global settings.

    Args:
        settings: Anything with a boolean ``enable_linenumber`` attribute,
            normally a GlobalSettings
    """

    def __init__(self, settings):
        self.settings = settings

    def new_instance(self, context: Any = None) -> LineNumberAnnotator:
        """Called once per new output stream."""
        return LineNumberAnnotator(bool(self.settings.enable_linenumber))
