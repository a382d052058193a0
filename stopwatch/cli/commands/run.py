# stopwatch/cli/commands/run.py
# `stopwatch run`: open the live stopwatch screen, then summarise & optionally export laps

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...config.settings import get_settings
from ...core.exceptions import StopwatchError
from ...core.formatting import format_clock
from ...core.types import StopwatchState
from ...core.verbose import cleanup_verbose, vlog_config
from ...sw_io.console import console
from ...sw_io.generics import exit_with_error
from ...sw_io.laps import default_export_path, export_laps, parse_export_format
from ...ui.screen import StopwatchRenderer, StopwatchScreen
from ...ui.theming.theme_engine import styled_checkmark
from ..app import app


# * Print elapsed total & lap list after the screen closes
def print_summary(state: StopwatchState) -> None:
    console.print()
    console.print(f"[bold]Elapsed[/] [sw.time]{format_clock(state.elapsed_hundredths)}[/]")
    if state.laps:
        for label in state.laps:
            console.print(f"  {label}")
    else:
        console.print("[dim]No laps recorded[/]")


@app.command()
def run(
    ctx: typer.Context,
    export: Optional[Path] = typer.Option(
        None, "--export", "-e", help="Write laps to this file when the stopwatch closes"
    ),
    save: bool = typer.Option(
        False, "--save", help="Write laps to the configured export_dir when the stopwatch closes"
    ),
    format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Lap export format: txt or json (default from config)"
    ),
) -> None:
    """Open the stopwatch. [bold]space[/] start/pause, [bold]l[/] lap, [bold]r[/] reset, [bold]q[/] quit."""
    settings = get_settings(ctx)

    try:
        fmt = parse_export_format(format or settings.export_format)
    except StopwatchError as e:
        raise typer.BadParameter(str(e), param_hint="--format")

    for key in ("refresh_per_second", "max_visible_laps", "show_key_hints"):
        vlog_config(key, getattr(settings, key))

    renderer = StopwatchRenderer(
        max_visible_laps=settings.max_visible_laps,
        show_key_hints=settings.show_key_hints,
    )
    screen = StopwatchScreen(
        renderer=renderer, refresh_per_second=settings.refresh_per_second
    )

    try:
        final = screen.run()
        print_summary(final)

        target = export
        if target is None and save:
            target = default_export_path(settings.export_path, fmt)
        if target is not None:
            written = export_laps(final, target, fmt)
            console.print(styled_checkmark(), f"Laps written to {written}")
    except StopwatchError as e:
        exit_with_error(f"{type(e).__name__}: {e}")
    finally:
        cleanup_verbose()
