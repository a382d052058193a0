# stopwatch/ui/theming/theme_definitions.py
# Named color palettes for the stopwatch screen & CLI output

from __future__ import annotations

from dataclasses import dataclass


# * One palette per theme; status colors (running/paused/errors) are fixed & live in theme_engine
@dataclass(frozen=True)
class Palette:
    digits: str  # large seconds readout
    fraction: str  # small hundredths readout & setting values
    frame: str  # panel border & bullets
    key: str  # key letters in the hint line
    banner: tuple[str, str]  # gradient stops for titles


THEMES: dict[str, Palette] = {
    "midnight": Palette("#60a5fa", "#93c5fd", "#1d4ed8", "#22d3ee", ("#60a5fa", "#1e3a8a")),
    "orchid": Palette("#f472b6", "#f9a8d4", "#a21caf", "#c084fc", ("#f472b6", "#7e22ce")),
    "neon": Palette("#22ffee", "#7dd3fc", "#7c3aed", "#39ff14", ("#22ffee", "#a855f7")),
    "ember": Palette("#fb923c", "#fdba74", "#c2410c", "#facc15", ("#fde047", "#ea580c")),
    "forest": Palette("#34d399", "#a7f3d0", "#047857", "#bef264", ("#6ee7b7", "#166534")),
}

DEFAULT_THEME = "midnight"
