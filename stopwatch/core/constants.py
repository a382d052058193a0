# stopwatch/core/constants.py
# Timing constants & enums shared by the engine, formatting & export layers

from enum import Enum


# * Tick period for the running stopwatch (one tick == one hundredth of a second)
TICK_INTERVAL_MS = 10
TICK_INTERVAL_SECONDS = TICK_INTERVAL_MS / 1000

# hundredths per displayed second
HUNDREDTHS_PER_SECOND = 100

# first lap index after construction or reset
FIRST_LAP_INDEX = 1


# * Supported lap export formats
class ExportFormat(Enum):
    TXT = "txt"
    JSON = "json"

