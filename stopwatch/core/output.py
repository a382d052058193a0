# stopwatch/core/output.py
# Log sink seam: core code (engine, ticker, file helpers) logs through whatever sink the CLI installs
# * No I/O here; the Rich-backed sink is stopwatch/cli/output_manager.py

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Protocol, runtime_checkable


# * How much the CLI prints: NORMAL is silent, -v adds VERBOSE, dev_mode unlocks DEBUG
class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@runtime_checkable
class LogSink(Protocol):
    def is_debug_enabled(self) -> bool: ...

    def verbose(self, msg: str, category: str = "INFO", detail: Optional[str] = None) -> None: ...

    def debug(self, msg: str, category: str = "DEBUG") -> None: ...

    # while the live screen owns the terminal, lines go to the log file only
    def mute_console(self, muted: bool) -> None: ...

    def end_session(self) -> None: ...


# * Drops everything; installed until the CLI callback runs (library use & tests)
class NullSink:
    def is_debug_enabled(self) -> bool:
        return False

    def verbose(self, msg: str, category: str = "INFO", detail: Optional[str] = None) -> None:
        pass

    def debug(self, msg: str, category: str = "DEBUG") -> None:
        pass

    def mute_console(self, muted: bool) -> None:
        pass

    def end_session(self) -> None:
        pass


_sink: LogSink = NullSink()


def install_sink(sink: LogSink) -> None:
    global _sink
    _sink = sink


def current_sink() -> LogSink:
    return _sink


def reset_sink() -> None:
    install_sink(NullSink())
