"""
Per-stream driver: feeds console lines through one annotator.
"""

from typing import Any, Iterable, Iterator

from .factory import AnnotatorFactory
from .markup import TextSegment


class ConsoleStream:
    """
    One build's console output.

    Owns its annotator for the lifetime of the stream; lines must be
    processed one at a time, in order.
    """

    def __init__(self, factory: AnnotatorFactory, context: Any = None):
        self.context = context
        self._annotator = factory.new_instance(context)
        self.lines_processed = 0
        self.failures = 0

    @property
    def annotator(self):
        return self._annotator

    def process(self, line: str) -> str:
        """Annotate one line and return its rendered text."""
        segment = TextSegment(line)
        result = self._annotator.annotate(segment, self.context)
        # Already logged by the annotator
        if not result.ok:
            self.failures += 1
        self._annotator = result.annotator
        self.lines_processed += 1
        return segment.text


def annotate_lines(
    lines: Iterable[str], factory: AnnotatorFactory, context: Any = None
) -> Iterator[str]:
    """
    Annotate a sequence of lines as a single stream.

    Yields:
        Rendered text of each line, in order
    """
    stream = ConsoleStream(factory, context)
    for line in lines:
        yield stream.process(line)
