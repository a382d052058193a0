# tests/unit/core/test_formatting.py
# Unit tests for lap labels & elapsed time readouts

import pytest

from stopwatch.core.formatting import format_clock, format_lap


class TestFormatLap:

    # * Verify label layout
    def test_label_layout(self):
        assert format_lap(1, 0, 0) == "1 LAP : 0.0"
        assert format_lap(12, 63, 99) == "12 LAP : 63.99"

    # * Verify hundredths are not zero padded
    def test_hundredths_unpadded(self):
        assert format_lap(3, 1, 5) == "3 LAP : 1.5"


class TestFormatClock:

    @pytest.mark.parametrize(
        "hundredths, expected",
        [
            (0, "0:00.00"),
            (1234, "0:12.34"),
            (6000, "1:00.00"),
            (359999, "59:59.99"),
            (360000, "1:00:00.00"),
            (372507, "1:02:05.07"),
        ],
    )
    def test_clock(self, hundredths, expected):
        assert format_clock(hundredths) == expected
