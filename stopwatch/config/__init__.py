# stopwatch/config/__init__.py
# Settings dataclass & JSON-backed settings manager

from .settings import StopwatchSettings, SettingsManager, settings_manager, get_settings, setting_names

__all__ = [
    "StopwatchSettings",
    "SettingsManager",
    "settings_manager",
    "get_settings",
    "setting_names",
]
