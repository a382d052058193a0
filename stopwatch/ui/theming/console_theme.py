# stopwatch/ui/theming/console_theme.py
# Push & refresh the stopwatch Rich theme on the shared console

from __future__ import annotations

from rich.theme import ThemeStackError

from ...sw_io.console import console
from .theme_engine import get_stopwatch_theme


def initialize_theme() -> None:
    console.push_theme(get_stopwatch_theme())


# * Replace the pushed theme after a settings change
def refresh_theme() -> None:
    try:
        console.pop_theme()
    except ThemeStackError:
        pass  # nothing pushed yet
    console.push_theme(get_stopwatch_theme())


# called at the start of every CLI invocation; safe to call repeatedly
def auto_initialize_theme() -> None:
    refresh_theme()
