# stopwatch/sw_io/laps.py
# Write a finished session's laps to a text or JSON file (write-only; never read back)

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from ..core.constants import ExportFormat
from ..core.exceptions import UnsupportedFormatError
from ..core.formatting import format_clock
from ..core.types import StopwatchState
from .generics import write_json_safe, write_text_safe


# * Resolve a format name (case-insensitive) or raise UnsupportedFormatError
def parse_export_format(name: str) -> ExportFormat:
    try:
        return ExportFormat(name.strip().lower())
    except ValueError:
        valid = ", ".join(f.value for f in ExportFormat)
        raise UnsupportedFormatError(
            f"Unsupported export format '{name}'. Valid formats: {valid}", name
        ) from None


# one label per line, most recent first, then a total line
def render_laps_text(state: StopwatchState) -> str:
    lines = list(state.laps)
    lines.append(f"TOTAL : {format_clock(state.elapsed_hundredths)}")
    return "\n".join(lines) + "\n"


def render_laps_json(state: StopwatchState) -> dict:
    return {
        "exported_at": datetime.now().isoformat(timespec="seconds"),
        "elapsed_hundredths": state.elapsed_hundredths,
        "elapsed": format_clock(state.elapsed_hundredths),
        "laps": list(state.laps),
    }


# * Default export path: <export_dir>/laps-<timestamp>.<ext>
def default_export_path(export_dir: Path, fmt: ExportFormat) -> Path:
    stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    return Path(export_dir) / f"laps-{stamp}.{fmt.value}"


# * Export snapshot laps; returns the written path
def export_laps(
    state: StopwatchState, path: Path, fmt: ExportFormat | str = ExportFormat.TXT
) -> Path:
    if isinstance(fmt, str):
        fmt = parse_export_format(fmt)

    path = Path(path)
    if fmt is ExportFormat.JSON:
        write_json_safe(render_laps_json(state), path)
    else:
        write_text_safe(render_laps_text(state), path)
    return path
