# stopwatch/cli/app.py
# Root Typer application & command registration
#
# ! Command imports at bottom of file are deferred to avoid circular imports w/ `app`

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables (STOPWATCH_HOME) once at startup
load_dotenv()

from ..config.settings import settings_manager
from ..sw_io.console import console


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    help="Terminal stopwatch w/ lap times",
    context_settings={"help_option_names": ["--help", "-h"]},
)


# * Load settings, set up logging & show quick usage when no subcommand is used
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging for debugging"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    ),
) -> None:
    from ..ui.theming.console_theme import auto_initialize_theme

    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()

    auto_initialize_theme()

    # must be after settings load to check dev_mode
    from ..core.verbose import init_verbose, vlog_config

    verbose_enabled = verbose or log_file is not None
    dev_mode = getattr(ctx.obj, "dev_mode", False)
    init_verbose(enabled=verbose_enabled, log_file=log_file, dev_mode=dev_mode)
    vlog_config("config_path", settings_manager.config_path)

    if ctx.invoked_subcommand is None:
        from ..ui.quick.quick_usage import show_quick_usage

        show_quick_usage()
        ctx.exit()


# ! import command modules here to avoid circular import w/ app object
from .commands import run as _run  # noqa: F401,E402
from .commands import config as _config  # noqa: F401,E402
