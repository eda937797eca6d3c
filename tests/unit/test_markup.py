"""
Unit tests for TextSegment.
"""

import pytest

from console_linenumbers.services.markup import TextSegment


class TestTextSegment:
    """Tests for insert and rendering."""

    def test_unmodified_segment_renders_original(self):
        segment = TextSegment("hello")

        assert segment.text == "hello"
        assert str(segment) == "hello"

    def test_insert_at_start(self):
        segment = TextSegment("hello")
        segment.insert(0, ">> ")

        assert segment.text == ">> hello"
        assert segment.original == "hello"

    def test_insert_in_middle_and_end(self):
        segment = TextSegment("hello")
        segment.insert(5, "!")
        segment.insert(2, "-")

        assert segment.text == "he-llo!"

    def test_same_offset_keeps_insertion_order(self):
        segment = TextSegment("x")
        segment.insert(0, "a")
        segment.insert(0, "b")

        assert segment.text == "abx"

    def test_insert_into_empty_segment(self):
        segment = TextSegment("")
        segment.insert(0, "    1 ")

        assert segment.text == "    1 "

    @pytest.mark.parametrize("offset", [-1, 6])
    def test_offset_out_of_range(self, offset):
        segment = TextSegment("hello")

        with pytest.raises(ValueError):
            segment.insert(offset, "x")
        assert segment.text == "hello"

    def test_non_string_markup_rejected(self):
        with pytest.raises(TypeError):
            TextSegment("hello").insert(0, 42)
