# stopwatch/ui/screen/input.py
# Keystroke handling for the live stopwatch screen

from __future__ import annotations

from readchar import key

from ...core.engine import StopwatchEngine

TOGGLE_KEYS = (key.SPACE, key.ENTER, "s", "p")
LAP_KEYS = ("l",)
RESET_KEYS = ("r",)
QUIT_KEYS = ("q", key.ESC, key.CTRL_C)


class StopwatchInputHandler:

    def __init__(self, engine: StopwatchEngine):
        self.engine = engine

    # map one key to an engine operation; returns False to leave the screen
    def handle_key(self, k: str) -> bool:
        k = k.lower() if len(k) == 1 else k

        if k in TOGGLE_KEYS:
            self.toggle()
        elif k in LAP_KEYS:
            self.engine.record_lap()
        elif k in RESET_KEYS:
            self.engine.reset()
        elif k in QUIT_KEYS:
            return False
        return True

    # single start/pause button: pause when running, otherwise start
    def toggle(self) -> None:
        if self.engine.state.is_running:
            self.engine.pause()
        else:
            self.engine.start()
