# stopwatch/ui/screen/__init__.py
# Live stopwatch screen: renderer, key handling & session loop

from .renderer import StopwatchRenderer, KEY_HINTS
from .input import StopwatchInputHandler
from .screen import StopwatchScreen

__all__ = ["StopwatchRenderer", "KEY_HINTS", "StopwatchInputHandler", "StopwatchScreen"]
