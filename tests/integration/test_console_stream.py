"""
End-to-end tests: settings -> factory -> console stream.
"""

from unittest.mock import patch

from console_linenumbers.services.annotator import LineNumberAnnotator
from console_linenumbers.services.factory import AnnotatorFactory
from console_linenumbers.services.markup import TextSegment
from console_linenumbers.services.pipeline import ConsoleStream, annotate_lines


class FlagOnly:
    """Minimal settings object."""

    def __init__(self, enable_linenumber):
        self.enable_linenumber = enable_linenumber


class TestAnnotatorFactory:
    """Tests for AnnotatorFactory."""

    def test_new_instance_uses_current_flag(self, enabled_settings):
        annotator = AnnotatorFactory(enabled_settings).new_instance(context="job #1")

        assert isinstance(annotator, LineNumberAnnotator)
        assert annotator.enabled is True
        assert annotator.line_number == 0

    def test_each_call_returns_fresh_annotator(self):
        factory = AnnotatorFactory(FlagOnly(True))

        assert factory.new_instance() is not factory.new_instance()

    def test_change_applies_only_to_later_instances(self, enabled_settings):
        factory = AnnotatorFactory(enabled_settings)
        running = factory.new_instance()

        enabled_settings.configure({"enableLinenumber": False})
        later = factory.new_instance()

        assert running.enabled is True
        assert later.enabled is False


class TestConsoleStream:
    """Tests for ConsoleStream and annotate_lines."""

    def test_enabled_stream(self, enabled_settings):
        factory = AnnotatorFactory(enabled_settings)

        result = list(annotate_lines(["build start", "", "step 2"], factory))

        assert result == ["    1 build start", "    2 ", "    3 step 2"]

    def test_disabled_stream(self, disabled_settings):
        factory = AnnotatorFactory(disabled_settings)

        assert list(annotate_lines(["a", "b"], factory)) == ["a", "b"]

    def test_line_endings_kept(self):
        factory = AnnotatorFactory(FlagOnly(True))

        result = list(annotate_lines(["one\n", "two\n"], factory))

        assert result == ["    1 one\n", "    2 two\n"]

    def test_concurrent_streams_are_independent(self):
        factory = AnnotatorFactory(FlagOnly(True))
        first = ConsoleStream(factory, "job-1")
        second = ConsoleStream(factory, "job-2")

        out = [first.process("a"), second.process("x"), first.process("b")]

        assert out == ["    1 a", "    1 x", "    2 b"]

    def test_failure_counted_and_stream_continues(self, caplog):
        stream = ConsoleStream(AnnotatorFactory(FlagOnly(True)))
        real_insert = TextSegment.insert
        calls = {"n": 0}

        def flaky_insert(self, offset, markup):
            calls["n"] += 1
            if calls["n"] == 2:
                raise RuntimeError("render fault")
            real_insert(self, offset, markup)

        with patch.object(TextSegment, "insert", flaky_insert):
            out = [stream.process(line) for line in ["one", "two", "three"]]

        assert out == ["    1 one", "two", "    3 three"]
        assert stream.failures == 1
        assert stream.lines_processed == 3
        assert "render fault" in caplog.text

    def test_context_passed_to_factory_and_annotator(self):
        class RecordingFactory:
            def __init__(self):
                self.contexts = []

            def new_instance(self, context=None):
                self.contexts.append(context)
                return LineNumberAnnotator(True)

        factory = RecordingFactory()
        stream = ConsoleStream(factory, context="build-42")
        stream.process("x")

        assert factory.contexts == ["build-42"]
        assert stream.context == "build-42"
