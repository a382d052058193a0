# stopwatch/cli/output_manager.py
# Rich console log sink w/ optional plain-text log file, installed by the CLI callback

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from ..core.output import LogLevel
from ..sw_io.console import console


class OutputManager:
    # Implements LogSink; console lines carry [elapsed] [CATEGORY] prefixes & are
    # mirrored as plain text to the log file, which also gets session markers

    def __init__(self) -> None:
        self.level = LogLevel.NORMAL
        self._muted = False
        self._session_start = time.monotonic()
        self._log_file_path: Path | None = None
        self._log_file_handle: TextIO | None = None

    # DEBUG is capped to VERBOSE unless dev_mode is on
    def initialize(
        self,
        requested_level: LogLevel = LogLevel.NORMAL,
        dev_mode: bool = False,
        log_file: Path | None = None,
    ) -> None:
        ceiling = LogLevel.DEBUG if dev_mode else LogLevel.VERBOSE
        self.level = min(requested_level, ceiling)
        self._session_start = time.monotonic()
        self._open_log_file(log_file)
        self._write_to_file(f"=== Session Started: {datetime.now().isoformat()} ({self.level.name}) ===")

    def is_debug_enabled(self) -> bool:
        return self.level >= LogLevel.DEBUG

    def verbose(self, msg: str, category: str = "INFO", detail: Optional[str] = None) -> None:
        if self.level < LogLevel.VERBOSE:
            return
        self._emit(f"[dim]\\[{self._elapsed()}][/] [bold cyan]\\[{category}][/] {msg}")
        self._write_to_file(f"[{self._elapsed()}] [{category}] {msg}")
        for line in (detail or "").splitlines():
            self._emit(f"  [dim]{line}[/]")
            self._write_to_file(f"  {line}")

    def debug(self, msg: str, category: str = "DEBUG") -> None:
        if not self.is_debug_enabled():
            return
        self._emit(f"[debug]\\[{category}][/] {msg}")
        self._write_to_file(f"[{self._elapsed()}] [{category}] {msg}")

    def mute_console(self, muted: bool) -> None:
        self._muted = muted

    def end_session(self) -> None:
        self._write_to_file(f"=== Session Ended: {datetime.now().isoformat()} ===")
        if self._log_file_handle is not None:
            self._log_file_handle.close()
            self._log_file_handle = None

    @property
    def log_file_path(self) -> Path | None:
        return self._log_file_path

    def _emit(self, markup: str) -> None:
        if not self._muted:
            console.print(markup)

    def _elapsed(self) -> str:
        return f"{time.monotonic() - self._session_start:.2f}s"

    # an unusable log path is reported once & logging continues on the console
    def _open_log_file(self, log_file: Path | None) -> None:
        self.end_session()
        self._log_file_path = None
        if log_file is None:
            return
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            self._log_file_handle = open(log_file, "a", encoding="utf-8")
            self._log_file_path = log_file
        except OSError as e:
            console.print(f"[warning]Could not open log file {log_file}: {e}[/]")

    def _write_to_file(self, line: str) -> None:
        if self._log_file_handle is not None:
            self._log_file_handle.write(f"{line}\n")
            self._log_file_handle.flush()
