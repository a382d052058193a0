# stopwatch/sw_io/console.py
# Shared Rich console for CLI output, verbose lines & the live stopwatch screen
#
# Modules import `console` once at module level; use_console() swaps the Console behind it,
# so a recording console (tests) or a fresh one reaches every importer at once.
# The stopwatch theme is pushed by cli/app.py:main_callback() via auto_initialize_theme().

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from rich.console import Console


class _SharedConsole:
    __slots__ = ("active",)

    def __init__(self) -> None:
        self.active = Console()

    def __getattr__(self, name: str) -> Any:
        return getattr(self.active, name)


console = _SharedConsole()


# * The Console currently behind `console` (Live needs the real instance)
def get_console() -> Console:
    return console.active


# * Temporarily route all stopwatch output to `replacement`
@contextmanager
def use_console(replacement: Console) -> Iterator[Console]:
    previous = console.active
    console.active = replacement
    try:
        yield replacement
    finally:
        console.active = previous
