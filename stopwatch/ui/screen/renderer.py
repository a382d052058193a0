# stopwatch/ui/screen/renderer.py
# Renders a StopwatchState snapshot as the single stopwatch screen

from __future__ import annotations

from ..core.rich_components import (
    Align,
    Group,
    RenderableType,
    Text,
    lap_table,
    stopwatch_panel,
)
from ...core.formatting import format_clock
from ...core.types import StopwatchState

# key hints shown under the lap list
KEY_HINTS = [
    ("space", "start/pause"),
    ("l", "lap"),
    ("r", "reset"),
    ("q", "quit"),
]

TITLE = "StopWatch"


class StopwatchRenderer:

    def __init__(self, max_visible_laps: int = 10, show_key_hints: bool = True):
        self.max_visible_laps = max_visible_laps
        self.show_key_hints = show_key_hints

    # large seconds followed by small unpadded hundredths
    def render_time(self, state: StopwatchState) -> Text:
        text = Text()
        text.append(str(state.seconds), style="sw.time")
        text.append(" ")
        text.append(str(state.hundredths), style="sw.fraction")
        return text

    def render_status(self, state: StopwatchState) -> Text:
        if state.is_running:
            label, style = "● RUNNING", "sw.running"
        else:
            label, style = "❚❚ PAUSED", "sw.paused"
        text = Text(label, style=style)
        text.append(f"   {format_clock(state.elapsed_hundredths)}", style="dim")
        return text

    # most recent first; older laps collapse into a "+N more" line
    def render_laps(self, state: StopwatchState) -> RenderableType:
        if not state.laps:
            return Text("No laps yet", style="dim")

        visible = state.laps[: self.max_visible_laps]
        table = lap_table()
        for label in visible:
            table.add_row(Text(label))

        hidden = len(state.laps) - len(visible)
        if hidden > 0:
            table.add_row(Text(f"+{hidden} more", style="dim"))
        return table

    def render_hints(self) -> Text:
        text = Text()
        for i, (k, action) in enumerate(KEY_HINTS):
            if i:
                text.append("  ")
            text.append(k, style="sw.key")
            text.append(f" {action}", style="dim")
        return text

    def render_screen(self, state: StopwatchState) -> RenderableType:
        parts: list[RenderableType] = [
            Text(""),
            Align.center(self.render_time(state)),
            Align.center(self.render_status(state)),
            Text(""),
            self.render_laps(state),
        ]
        if self.show_key_hints:
            parts.extend([Text(""), self.render_hints()])
        return stopwatch_panel(Group(*parts), title=TITLE)
