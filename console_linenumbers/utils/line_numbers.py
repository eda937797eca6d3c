"""Line numbering utilities for whole blocks of text."""

import re

from ..services.annotator import LINE_NUMBER_WIDTH, LineNumberAnnotator
from ..services.markup import TextSegment

# "    7 ", "   42 ", ..., "123456 ": padded digits filling the field, then one space
_PREFIX_RE = re.compile(
    "^(?:%s) " % "|".join(
        [" " * (LINE_NUMBER_WIDTH - n) + r"\d{%d}" % n for n in range(1, LINE_NUMBER_WIDTH)]
        + [r"\d{%d,}" % LINE_NUMBER_WIDTH]
    )
)


def add_line_numbers(content: str, enabled: bool = True) -> str:
    """
    Add line numbers to content the same way a console stream would.

    Format: "   42 actual line here"

    Args:
        content: The text content to number
        enabled: When False the content is returned unchanged

    Returns:
        Content with line numbers prefixed (line endings preserved)
    """
    if not content:
        return content

    annotator = LineNumberAnnotator(enabled)
    numbered = []
    for line in content.splitlines(keepends=True):
        segment = TextSegment(line)
        annotator = annotator.annotate(segment).annotator
        numbered.append(segment.text)
    return "".join(numbered)


def strip_line_numbers(content: str) -> str:
    """
    Remove prefixes added by add_line_numbers.

    Lines without a prefix are left alone.
    """
    if not content:
        return content
    return "".join(
        _PREFIX_RE.sub("", line, count=1)
        for line in content.splitlines(keepends=True)
    )
