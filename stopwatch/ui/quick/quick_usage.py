# stopwatch/ui/quick/quick_usage.py
# Quick usage blurb for when no subcommand is provided

from __future__ import annotations

from ...sw_io.console import console
from ..theming.theme_engine import banner

COMMANDS = [
    ("run", "Open the stopwatch"),
    ("run --export laps.txt", "Save laps when you quit"),
    ("config", "Show settings"),
    ("config set theme neon", "Change a setting"),
]


# * Show banner, common commands & help reference
def show_quick_usage() -> None:
    console.print()
    console.print(banner("StopWatch"))
    console.print()
    console.print("[bold white]Quick usage:[/]")

    max_cmd_len = max(len(cmd) for cmd, _ in COMMANDS)
    for cmd, desc in COMMANDS:
        padding = max_cmd_len - len(cmd) + 4
        console.print(f"  [dim]stopwatch[/] [bold]{cmd}[/]{' ' * padding}[dim]# {desc}[/]")
    console.print()

    console.print("[dim]For full help:[/] [bold]stopwatch --help[/]")
    console.print()
