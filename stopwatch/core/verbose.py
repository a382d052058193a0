# stopwatch/core/verbose.py
# Verbose logging helpers - delegate to the installed log sink w/ categorised lines for engine ops, laps, config & file I/O

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import current_sink, install_sink, LogLevel


# * Initialize verbose logging for a CLI session
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
) -> None:
    if enabled and dev_mode:
        requested_level = LogLevel.DEBUG
    elif enabled:
        requested_level = LogLevel.VERBOSE
    else:
        requested_level = LogLevel.NORMAL

    from ..cli.output_manager import OutputManager

    manager = OutputManager()
    manager.initialize(
        requested_level=requested_level,
        dev_mode=dev_mode,
        log_file=log_file,
    )
    install_sink(manager)


# * Core verbose logging function
def vlog(category: str, message: str, detail: str | None = None) -> None:
    current_sink().verbose(message, category, detail)


# * Log an engine operation w/ the elapsed value it saw
def vlog_engine(operation: str, elapsed_hundredths: int, running: bool) -> None:
    state = "running" if running else "paused"
    current_sink().verbose(
        f"{operation} ({state}, elapsed={elapsed_hundredths})", "ENGINE"
    )


# * Log a recorded lap label
def vlog_lap(label: str) -> None:
    current_sink().verbose(label, "LAP")


# * Log file read operation
def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    current_sink().verbose(f"Read: {path}{size_str}", "FILE")


# * Log file write operation
def vlog_file_write(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    current_sink().verbose(f"Write: {path}{size_str}", "FILE")


# * Log configuration values being used
def vlog_config(key: str, value: Any) -> None:
    current_sink().verbose(f"{key} = {value}", "CONFIG")


# * Dev-mode only logging
def vlog_dev(category: str, message: str, detail: str | None = None) -> None:
    sink = current_sink()
    if sink.is_debug_enabled():
        sink.verbose(message, f"DEV:{category}", detail)


def cleanup_verbose() -> None:
    current_sink().end_session()
