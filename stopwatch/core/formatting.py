# stopwatch/core/formatting.py
# Lap label & elapsed time formatting (pure)

from __future__ import annotations

from .constants import HUNDREDTHS_PER_SECOND


# * Lap label; hundredths are intentionally unpadded ("3 LAP : 1.5" is 1.05s)
def format_lap(index: int, seconds: int, hundredths: int) -> str:
    return f"{index} LAP : {seconds}.{hundredths}"


# * Clock style readout: m:ss.hh, or h:mm:ss.hh once past an hour
def format_clock(elapsed_hundredths: int) -> str:
    total_seconds, hundredths = divmod(elapsed_hundredths, HUNDREDTHS_PER_SECOND)
    minutes, seconds = divmod(total_seconds, 60)
    if minutes >= 60:
        hours, minutes = divmod(minutes, 60)
        return f"{hours}:{minutes:02d}:{seconds:02d}.{hundredths:02d}"
    return f"{minutes}:{seconds:02d}.{hundredths:02d}"
