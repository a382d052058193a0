# stopwatch/cli/commands/config.py
# `stopwatch config`: show, read, change & reset the JSON-backed settings

from __future__ import annotations

import json
from typing import Any

import typer

from ...config.settings import setting_names, settings_manager
from ...core.exceptions import StopwatchError, format_error_message
from ...sw_io.console import console
from ...ui.theming.theme_engine import banner, styled_bullet, styled_checkmark
from ..app import app

config_app = typer.Typer(rich_markup_mode="rich", help="Manage stopwatch settings")
app.add_typer(config_app, name="config")


def _require_known(key: str) -> None:
    if key not in setting_names():
        raise typer.BadParameter(
            f"Unknown setting: {key} (known: {', '.join(setting_names())})",
            param_hint="KEY",
        )


# command-line text -> JSON value (3, false, null, "quoted"); anything else stays a string
def parse_cli_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


# values print as JSON so `config get` output can be pasted back into `config set`
def _styled_value(value: Any) -> str:
    return f"[sw.fraction]{json.dumps(value)}[/]"


def _show_settings() -> None:
    console.print()
    console.print(banner("Current Configuration"))
    console.print(f"[dim]{settings_manager.config_path}[/]")
    console.print()
    for key, value in settings_manager.list_settings().items():
        console.print(styled_bullet(), f"[bold]{key}[/]", "[dim]=[/]", _styled_value(value))
    console.print()


@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    """Show settings when no subcommand is given."""
    if ctx.invoked_subcommand is None:
        _show_settings()


@config_app.command(name="list")
def list_cmd() -> None:
    """List all settings."""
    _show_settings()


@config_app.command()
def get(key: str) -> None:
    """Print a single setting as JSON."""
    _require_known(key)
    console.print(json.dumps(settings_manager.get(key)), markup=False, highlight=False)


@config_app.command(name="set")
def set_cmd(key: str, value: str) -> None:
    """Set a setting; the value is parsed as JSON when possible & validated before saving."""
    _require_known(key)
    try:
        settings_manager.set(key, parse_cli_value(value))
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="VALUE")
    except StopwatchError as e:
        console.print(format_error_message(type(e).__name__, str(e)))
        raise typer.Exit(1)

    # new palette applies to the rest of this invocation too
    if key == "theme":
        from ...ui.theming.console_theme import refresh_theme

        refresh_theme()

    console.print(styled_checkmark(), f"{key} =", _styled_value(settings_manager.get(key)))


@config_app.command()
def reset(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Restore every setting to its default."""
    if not yes and not typer.confirm("Reset all settings to defaults?"):
        console.print("[dim]Aborted[/]")
        raise typer.Exit(1)
    try:
        settings_manager.reset()
    except StopwatchError as e:
        console.print(format_error_message(type(e).__name__, str(e)))
        raise typer.Exit(1)
    console.print(styled_checkmark(), "Settings reset to defaults")


@config_app.command()
def path() -> None:
    """Print the config file location."""
    typer.echo(str(settings_manager.config_path))
