# stopwatch/core/engine.py
# StopwatchEngine: elapsed-time state machine, lap bookkeeping & snapshot emission

from __future__ import annotations

from threading import RLock
from typing import Callable

from .constants import FIRST_LAP_INDEX, TICK_INTERVAL_SECONDS
from .formatting import format_lap
from .output import current_sink
from .ticker import RepeatingTicker, Ticker, TickerFactory
from .types import StateListener, StopwatchState
from .verbose import vlog_engine, vlog_lap


class StopwatchEngine:
    """Owns elapsed time & lap history for one UI session.

    Two logical states, paused & running; laps accumulate in either. Every
    operation is total & returns immediately. Ticks arrive on the ticker's
    thread & are serialized w/ the public operations through one re-entrant
    lock; snapshots are built & delivered to listeners inside that lock so
    listeners see them in tick order.

    Each start() opens a new generation. pause(), reset() & close() move the
    generation on, so a tick queued by a cancelled ticker is dropped & never
    mutates state after the cancelling call returns.
    """

    def __init__(
        self,
        ticker_factory: TickerFactory | None = None,
        interval: float = TICK_INTERVAL_SECONDS,
    ) -> None:
        self._ticker_factory: TickerFactory = ticker_factory or RepeatingTicker
        self._interval = interval
        self._lock = RLock()

        self._elapsed_hundredths = 0
        self._running = False
        self._laps: list[str] = []
        self._lap_counter = FIRST_LAP_INDEX

        self._ticker: Ticker | None = None
        self._generation = 0
        self._listeners: list[StateListener] = []
        self._state = StopwatchState()
        self._closed = False

    # ===== OBSERVABLE STATE =====

    # latest emitted snapshot
    @property
    def state(self) -> StopwatchState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def lap_counter(self) -> int:
        return self._lap_counter

    @property
    def has_active_ticker(self) -> bool:
        return self._ticker is not None

    # register listener for every emitted snapshot; returns an unsubscribe callable
    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    # ===== OPERATIONS =====
    # state changes & snapshot delivery happen under the lock; log lines are written after it is released

    def start(self) -> None:
        with self._lock:
            if self._running or self._closed:
                return
            self._running = True
            if self._ticker is None:
                self._generation += 1
                generation = self._generation
                self._ticker = self._ticker_factory(
                    self._interval, lambda: self._on_tick(generation)
                )
                self._ticker.start()
            snapshot = self._emit()
        vlog_engine("start", snapshot.elapsed_hundredths, snapshot.is_running)

    def pause(self) -> None:
        with self._lock:
            if not self._running:
                return
            self._running = False
            self._cancel_ticker()
            snapshot = self._emit()
        vlog_engine("pause", snapshot.elapsed_hundredths, snapshot.is_running)

    def reset(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._cancel_ticker()
            self._running = False
            self._elapsed_hundredths = 0
            self._laps.clear()
            self._lap_counter = FIRST_LAP_INDEX
            snapshot = self._emit()
        vlog_engine("reset", snapshot.elapsed_hundredths, snapshot.is_running)

    # record current time at the front of the lap list; paused laps capture the frozen time
    def record_lap(self) -> None:
        with self._lock:
            if self._closed:
                return
            current = self._state
            label = format_lap(self._lap_counter, current.seconds, current.hundredths)
            self._laps.insert(0, label)
            self._lap_counter += 1
            self._emit()
        vlog_lap(label)

    # ===== LIFECYCLE =====

    # end of session: stop ticking & drop listeners; later operations stay harmless
    def close(self) -> None:
        with self._lock:
            self._cancel_ticker()
            self._running = False
            self._listeners.clear()
            self._closed = True

    def __enter__(self) -> "StopwatchEngine":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ===== INTERNALS =====

    def _on_tick(self, generation: int) -> None:
        with self._lock:
            # stale tick from a cancelled ticker
            if generation != self._generation or not self._running:
                return
            self._elapsed_hundredths += 1
            self._emit()

    def _cancel_ticker(self) -> None:
        self._generation += 1
        if self._ticker is not None:
            self._ticker.cancel()
            self._ticker = None

    # a failing listener is logged & skipped; the operation & the other listeners carry on
    def _emit(self) -> StopwatchState:
        snapshot = StopwatchState(
            elapsed_hundredths=self._elapsed_hundredths,
            is_running=self._running,
            laps=tuple(self._laps),
        )
        self._state = snapshot
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                current_sink().debug(f"Listener {listener!r} failed: {e}", "ENGINE")
        return snapshot
