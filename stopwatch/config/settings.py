# stopwatch/config/settings.py
# Stopwatch settings (display, theme & lap export defaults) persisted as JSON

import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional

import typer

from ..core.constants import ExportFormat
from ..core.exceptions import JSONParsingError
from ..sw_io.generics import read_json_safe, write_json_safe
from ..ui.theming.theme_definitions import THEMES

# env var overriding the config directory (also read from .env)
HOME_ENV_VAR = "STOPWATCH_HOME"

EXPORT_FORMATS = sorted(f.value for f in ExportFormat)


# bool is an int subclass; settings never accept it as a number
def _strict_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# * User-tunable settings; the 10ms tick is fixed & deliberately absent
@dataclass
class StopwatchSettings:
    # display
    theme: str = "midnight"
    refresh_per_second: int = 30
    show_key_hints: bool = True
    max_visible_laps: int = 10

    # lap export
    export_dir: str = "laps"
    export_format: str = "txt"

    # unlocks DEBUG output w/ --verbose
    dev_mode: bool = False

    # first failing rule raises ValueError; values are never coerced
    def __post_init__(self) -> None:
        rules = [
            (
                self.theme in THEMES,
                f"theme must be one of {sorted(THEMES)}, got {self.theme!r}",
            ),
            (
                _strict_int(self.refresh_per_second) and 1 <= self.refresh_per_second <= 120,
                f"refresh_per_second must be an integer 1-120, got {self.refresh_per_second!r}",
            ),
            (
                isinstance(self.show_key_hints, bool),
                f"show_key_hints must be true or false, got {self.show_key_hints!r}",
            ),
            (
                _strict_int(self.max_visible_laps) and self.max_visible_laps >= 1,
                f"max_visible_laps must be a positive integer, got {self.max_visible_laps!r}",
            ),
            # `config set export_dir 2024` arrives JSON-coerced as an int
            (
                isinstance(self.export_dir, str) and bool(self.export_dir.strip()),
                f"export_dir must be a non-empty path string, got {self.export_dir!r}",
            ),
            (
                self.export_format in EXPORT_FORMATS,
                f"export_format must be one of {EXPORT_FORMATS}, got {self.export_format!r}",
            ),
            (
                isinstance(self.dev_mode, bool),
                f"dev_mode must be true or false, got {self.dev_mode!r}",
            ),
        ]
        for ok, message in rules:
            if not ok:
                raise ValueError(message)

    @property
    def export_path(self) -> Path:
        return Path(self.export_dir)


def setting_names() -> list[str]:
    return [f.name for f in fields(StopwatchSettings)]


# * Config file location: $STOPWATCH_HOME/config.json, else ~/.stopwatch/config.json
def default_config_path() -> Path:
    home = os.environ.get(HOME_ENV_VAR)
    base = Path(home) if home else Path.home() / ".stopwatch"
    return base / "config.json"


# * Loads once & caches; every change rebuilds the dataclass so validation always runs
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or default_config_path()
        self._settings: Optional[StopwatchSettings] = None

    # a broken config file warns & falls back to defaults instead of blocking the stopwatch
    def load(self) -> StopwatchSettings:
        if self._settings is None:
            self._settings = self._read()
        return self._settings

    def _read(self) -> StopwatchSettings:
        if not self.config_path.exists():
            return StopwatchSettings()
        try:
            return StopwatchSettings(**read_json_safe(self.config_path))
        except (JSONParsingError, TypeError, ValueError) as e:
            typer.echo(f"Warning: Invalid config file {self.config_path}: {e}")
            typer.echo("Using default settings")
            return StopwatchSettings()

    def save(self, settings: StopwatchSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

    def get(self, key: str) -> Any:
        return getattr(self.load(), key, None)

    def set(self, key: str, value: Any) -> None:
        if key not in setting_names():
            raise ValueError(f"Unknown setting: {key}")
        self.save(StopwatchSettings(**{**asdict(self.load()), key: value}))

    def reset(self) -> None:
        self.save(StopwatchSettings())

    def list_settings(self) -> dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()


# * Settings stored on the root context by the CLI callback, else the global manager's
def get_settings(ctx: typer.Context) -> StopwatchSettings:
    obj = ctx.find_root().obj
    if isinstance(obj, StopwatchSettings):
        return obj
    return settings_manager.load()
