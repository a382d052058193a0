# stopwatch/ui/core/rich_components.py
# Rich building blocks for the stopwatch screen; styles resolve against the pushed stopwatch theme

from __future__ import annotations

from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme


# * Outer frame of the stopwatch screen
def stopwatch_panel(body: RenderableType, title: str) -> Panel:
    return Panel(
        body,
        title=f"[bold]{title}[/]",
        title_align="left",
        border_style="sw.frame",
        padding=(0, 1),
    )


# * Single borderless column for lap labels
def lap_table() -> Table:
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("lap")
    return table


__all__ = [
    "Align",
    "Console",
    "Group",
    "Live",
    "Panel",
    "RenderableType",
    "Table",
    "Text",
    "Theme",
    "lap_table",
    "stopwatch_panel",
]
