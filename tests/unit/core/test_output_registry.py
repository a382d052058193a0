# tests/unit/core/test_output_registry.py
# Unit tests for log levels, the silent sink & sink installation

from stopwatch.core.output import (
    LogLevel,
    LogSink,
    NullSink,
    current_sink,
    install_sink,
    reset_sink,
)
from stopwatch.cli.output_manager import OutputManager


# * Verify levels are ordered correctly
def test_level_ordering():
    assert LogLevel.NORMAL < LogLevel.VERBOSE < LogLevel.DEBUG


# * Verify the silent sink accepts every call
def test_null_sink_is_silent():
    sink = NullSink()
    assert isinstance(sink, LogSink)
    assert sink.is_debug_enabled() is False
    sink.verbose("test message", "CATEGORY", "detail")
    sink.debug("test message", "CATEGORY")
    sink.mute_console(True)
    sink.end_session()


# * Verify install & reset
def test_install_and_reset():
    custom = OutputManager()
    install_sink(custom)
    assert current_sink() is custom

    reset_sink()
    assert isinstance(current_sink(), NullSink)
