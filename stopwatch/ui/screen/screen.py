# stopwatch/ui/screen/screen.py
# Interactive stopwatch session: engine + Rich Live display + readchar key loop

from __future__ import annotations

from typing import Callable

from readchar import readkey

from ..core.rich_components import Console, Live, RenderableType
from ...core.engine import StopwatchEngine
from ...core.types import StopwatchState
from ...core.output import current_sink
from ...core.verbose import vlog, vlog_dev
from ...sw_io.console import get_console
from .input import StopwatchInputHandler
from .renderer import StopwatchRenderer


# * Owns one engine for the lifetime of the screen & renders its latest snapshot
# * Ticks arrive on the ticker thread; the listener only swaps the latest snapshot,
# * Live redraws from it at refresh_per_second
class StopwatchScreen:
    def __init__(
        self,
        engine: StopwatchEngine | None = None,
        renderer: StopwatchRenderer | None = None,
        refresh_per_second: int = 30,
        console: Console | None = None,
        read_key: Callable[[], str] = readkey,
    ):
        self.engine = engine or StopwatchEngine()
        self.renderer = renderer or StopwatchRenderer()
        self.input_handler = StopwatchInputHandler(self.engine)
        self.refresh_per_second = refresh_per_second
        self.console = console or get_console()
        self._read_key = read_key

        self._latest: StopwatchState = self.engine.state
        self._unsubscribe = self.engine.subscribe(self._on_state)

    @property
    def latest(self) -> StopwatchState:
        return self._latest

    def _on_state(self, state: StopwatchState) -> None:
        self._latest = state

    def render_screen(self) -> RenderableType:
        return self.renderer.render_screen(self._latest)

    def handle_key(self, k: str) -> bool:
        return self.input_handler.handle_key(k)

    # run until quit; always disposes the engine & returns the final snapshot
    # log lines reach only the log file while Live owns the terminal
    def run(self) -> StopwatchState:
        vlog("SCREEN", "Stopwatch screen opened")
        sink = current_sink()
        sink.mute_console(True)
        try:
            with Live(
                get_renderable=self.render_screen,
                console=self.console,
                screen=True,
                refresh_per_second=self.refresh_per_second,
            ) as live:
                while True:
                    try:
                        k = self._read_key()
                    except KeyboardInterrupt:
                        break
                    vlog_dev("KEY", repr(k))
                    if not self.handle_key(k):
                        break
                    live.refresh()
        finally:
            final = self.close()
            sink.mute_console(False)
        vlog("SCREEN", f"Stopwatch screen closed w/ {len(final.laps)} laps")
        return final

    # pause so the final snapshot is frozen, then release the engine
    def close(self) -> StopwatchState:
        self.engine.pause()
        final = self.engine.state
        self._unsubscribe()
        self.engine.close()
        return final
