# tests/unit/core/test_verbose.py
# Unit tests for verbose helpers & engine logging through the installed sink

from threading import Thread
from unittest.mock import MagicMock

from stopwatch.cli.output_manager import OutputManager
from stopwatch.core.output import LogLevel, NullSink, current_sink, install_sink, reset_sink
from stopwatch.core.verbose import init_verbose, vlog_dev, vlog_engine, vlog_lap


# * Verify the sink defaults to the silent one
def test_default_is_null_sink():
    assert isinstance(current_sink(), NullSink)


# * Verify init_verbose installs a console sink at the requested level
def test_init_verbose_levels():
    init_verbose(enabled=True)
    assert isinstance(current_sink(), OutputManager)
    assert current_sink().level == LogLevel.VERBOSE

    init_verbose(enabled=True, dev_mode=True)
    assert current_sink().level == LogLevel.DEBUG

    init_verbose(enabled=False)
    assert current_sink().level == LogLevel.NORMAL
    reset_sink()


# * Verify engine & lap helpers route to categories
def test_engine_and_lap_categories():
    sink = MagicMock()
    install_sink(sink)

    vlog_engine("pause", 120, False)
    vlog_lap("1 LAP : 1.20")

    sink.verbose.assert_any_call("pause (paused, elapsed=120)", "ENGINE")
    sink.verbose.assert_any_call("1 LAP : 1.20", "LAP")


# * Verify dev logging only fires at DEBUG
def test_vlog_dev_requires_debug():
    sink = MagicMock()
    sink.is_debug_enabled.return_value = False
    install_sink(sink)

    vlog_dev("KEY", "'l'")
    sink.verbose.assert_not_called()

    sink.is_debug_enabled.return_value = True
    vlog_dev("KEY", "'l'")
    sink.verbose.assert_called_once_with("'l'", "DEV:KEY", None)


# * Verify engine operations log through the installed sink
def test_engine_logs_operations(engine):
    sink = MagicMock()
    install_sink(sink)

    engine.start()
    engine.record_lap()
    engine.reset()

    categories = [c.args[1] for c in sink.verbose.call_args_list]
    assert categories == ["ENGINE", "LAP", "ENGINE"]


# * Verify log lines are written w/ the engine lock released (a ticker thread could take it)
def test_engine_logs_outside_lock(engine):
    lock_free: list[bool] = []

    def check_lock_free(*args):
        def try_acquire():
            acquired = engine._lock.acquire(timeout=0.5)
            if acquired:
                engine._lock.release()
            lock_free.append(acquired)

        worker = Thread(target=try_acquire)
        worker.start()
        worker.join()

    sink = MagicMock()
    sink.verbose.side_effect = check_lock_free
    install_sink(sink)

    engine.start()
    engine.record_lap()
    engine.pause()
    engine.reset()

    assert lock_free == [True, True, True, True]
