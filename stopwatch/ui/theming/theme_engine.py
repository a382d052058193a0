# stopwatch/ui/theming/theme_engine.py
# Resolve the configured palette into a Rich theme, banner gradients & small styled glyphs

from __future__ import annotations

from rich.color import Color, blend_rgb
from rich.style import Style

from ..core.rich_components import Text, Theme
from .theme_definitions import DEFAULT_THEME, THEMES, Palette

# fixed status colors, shared by every palette
RUNNING = "#10b981"
PAUSED = "#f59e0b"
SUCCESS = "#10b981"
WARNING = "#f59e0b"
ERROR = "#ef4444"
DIM = "#9ca3af"
DEBUG = "#06b6d4"


# palette for the configured theme; unknown names fall back to the default
def current_palette() -> Palette:
    # settings imports theme_definitions, so it is loaded lazily here
    from ...config.settings import settings_manager

    return THEMES.get(settings_manager.load().theme, THEMES[DEFAULT_THEME])


# * Style names used by the renderer & CLI markup ([sw.time], [sw.fraction], ...)
def get_stopwatch_theme(palette: Palette | None = None) -> Theme:
    palette = palette or current_palette()
    return Theme(
        {
            "sw.time": f"bold {palette.digits}",
            "sw.fraction": palette.fraction,
            "sw.frame": palette.frame,
            "sw.key": f"bold {palette.key}",
            "sw.running": f"bold {RUNNING}",
            "sw.paused": f"bold {PAUSED}",
            "success": SUCCESS,
            "warning": WARNING,
            "error": ERROR,
            "dim": DIM,
            "debug": DEBUG,
        }
    )


# * Title text blended character by character between the palette's banner stops
def banner(text: str, palette: Palette | None = None) -> Text:
    palette = palette or current_palette()
    start, end = (Color.parse(c).get_truecolor() for c in palette.banner)

    result = Text()
    span = max(len(text) - 1, 1)
    for i, char in enumerate(text):
        rgb = blend_rgb(start, end, i / span)
        result.append(char, style=Style(color=Color.from_triplet(rgb)))
    return result


def styled_checkmark() -> Text:
    return Text("✓", style=SUCCESS)


def styled_bullet() -> Text:
    return Text("•", style="sw.frame")
