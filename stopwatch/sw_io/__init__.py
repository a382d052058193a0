# stopwatch/sw_io/__init__.py
# I/O layer: shared console, JSON/text file helpers & lap export

from .console import console, get_console, use_console
from .generics import (
    ensure_parent,
    read_json_safe,
    write_json_safe,
    write_text_safe,
    exit_with_error,
)
from .laps import export_laps, parse_export_format, default_export_path

__all__ = [
    "console",
    "get_console",
    "use_console",
    "ensure_parent",
    "read_json_safe",
    "write_json_safe",
    "write_text_safe",
    "exit_with_error",
    "export_laps",
    "parse_export_format",
    "default_export_path",
]
