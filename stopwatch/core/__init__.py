# stopwatch/core/__init__.py
# Core stopwatch package - engine, snapshot types & formatting

from .engine import StopwatchEngine
from .ticker import RepeatingTicker, Ticker, TickerFactory
from .types import StopwatchState, StateListener
from .formatting import format_lap, format_clock

__all__ = [
    "StopwatchEngine",
    "RepeatingTicker",
    "Ticker",
    "TickerFactory",
    "StopwatchState",
    "StateListener",
    "format_lap",
    "format_clock",
]
