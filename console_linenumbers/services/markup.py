"""
Mutable text segment for one line of console output.
"""

from typing import List, Tuple


class TextSegment:
    """
    One line of output that accepts insertions at character offsets.

    The original text is never modified; insertions are recorded and
    applied when the segment is rendered through ``text``.
    """

    def __init__(self, text: str):
        self._original = text
        self._inserts: List[Tuple[int, str]] = []

    @property
    def original(self) -> str:
        return self._original

    def insert(self, offset: int, markup: str) -> None:
        """
        Insert markup before the character at offset.

        Raises:
            TypeError: If markup is not a string
            ValueError: If offset is outside 0..len(original)
        """
        if not isinstance(markup, str):
            raise TypeError(f"markup must be str, not {type(markup).__name__}")
        if not 0 <= offset <= len(self._original):
            raise ValueError(
                f"offset {offset} out of range for segment of length {len(self._original)}"
            )
        self._inserts.append((offset, markup))

    @property
    def text(self) -> str:
        if not self._inserts:
            return self._original

        parts = []
        pos = 0
        # sorted() is stable: equal offsets keep insertion order
        for offset, markup in sorted(self._inserts, key=lambda item: item[0]):
            parts.append(self._original[pos:offset])
            parts.append(markup)
            pos = offset
        parts.append(self._original[pos:])
        return "".join(parts)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"TextSegment({self.text!r})"
