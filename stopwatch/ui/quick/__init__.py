# stopwatch/ui/quick/__init__.py
from .quick_usage import show_quick_usage

__all__ = ["show_quick_usage"]
