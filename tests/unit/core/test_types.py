# tests/unit/core/test_types.py
# Unit tests for the StopwatchState snapshot

import pytest

from stopwatch.core.types import StopwatchState


# * Verify seconds & hundredths derive from elapsed_hundredths
def test_derived_fields():
    state = StopwatchState(elapsed_hundredths=1234)
    assert state.seconds == 12
    assert state.hundredths == 34


# * Verify next_lap tracks lap count
def test_next_lap():
    assert StopwatchState().next_lap == 1
    assert StopwatchState(laps=("2 LAP : 0.1", "1 LAP : 0.0")).next_lap == 3


# * Verify snapshots are frozen value objects
def test_frozen_and_comparable():
    state = StopwatchState(elapsed_hundredths=5, laps=("1 LAP : 0.5",))
    assert state == StopwatchState(elapsed_hundredths=5, laps=("1 LAP : 0.5",))
    with pytest.raises(AttributeError):
        state.is_running = True  # type: ignore[misc]
