# stopwatch/core/types.py
# Immutable stopwatch snapshot emitted to observers

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .constants import FIRST_LAP_INDEX, HUNDREDTHS_PER_SECOND


# * Snapshot of the stopwatch at one point in time
# * seconds/hundredths are derived from elapsed_hundredths & never stored
@dataclass(frozen=True)
class StopwatchState:
    elapsed_hundredths: int = 0
    is_running: bool = False
    # most recent lap first
    laps: tuple[str, ...] = ()

    @property
    def seconds(self) -> int:
        return self.elapsed_hundredths // HUNDREDTHS_PER_SECOND

    @property
    def hundredths(self) -> int:
        return self.elapsed_hundredths % HUNDREDTHS_PER_SECOND

    # index the next recorded lap will carry
    @property
    def next_lap(self) -> int:
        return len(self.laps) + FIRST_LAP_INDEX


# observer callback receiving each emitted snapshot
StateListener = Callable[[StopwatchState], None]
