# stopwatch/ui/theming/__init__.py
# Theming: palettes, the Rich theme built from them & console theme refresh

from .theme_definitions import THEMES, DEFAULT_THEME, Palette
from .theme_engine import (
    banner,
    current_palette,
    get_stopwatch_theme,
    styled_checkmark,
    styled_bullet,
)

__all__ = [
    "THEMES",
    "DEFAULT_THEME",
    "Palette",
    "banner",
    "current_palette",
    "get_stopwatch_theme",
    "styled_checkmark",
    "styled_bullet",
]
