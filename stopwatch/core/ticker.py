# stopwatch/core/ticker.py
# Cancellable repeating ticker driving the running stopwatch

from __future__ import annotations

from threading import Event, Thread
from typing import Callable, Protocol

from .output import current_sink


# * Anything the engine can start & cancel as its periodic tick source
class Ticker(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


# builds a ticker from (interval seconds, callback)
TickerFactory = Callable[[float, Callable[[], None]], Ticker]


# * Fixed-delay repeating ticker on a daemon thread
# * Each firing waits `interval` after the previous callback returns (no drift correction),
# * so firings never overlap & arrive in order
class RepeatingTicker:
    def __init__(self, interval: float, callback: Callable[[], None]):
        self.interval = interval
        self.callback = callback
        self._stopped = Event()
        self._thread: Thread | None = None

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = Thread(target=self._run, name="stopwatch-ticker", daemon=True)
        self._thread.start()

    # stop future firings; a firing already past its wait is discarded by the engine
    def cancel(self) -> None:
        self._stopped.set()

    @property
    def is_active(self) -> bool:
        return (
            self._thread is not None
            and self._thread.is_alive()
            and not self._stopped.is_set()
        )

    # block until the worker thread has exited (tests & shutdown)
    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def _run(self) -> None:
        while not self._stopped.wait(self.interval):
            try:
                self.callback()
            except Exception as e:
                current_sink().debug(f"Tick callback failed: {e}", "TICK")
