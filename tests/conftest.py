# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path

import pytest

from test_support.manual_ticker import ManualTickerFactory


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()

    sw_dir = fake_home / ".stopwatch"
    sw_dir.mkdir()

    config_data = {
        "theme": "midnight",
        "refresh_per_second": 30,
        "show_key_hints": True,
        "max_visible_laps": 10,
        "export_dir": "laps",
        "export_format": "txt",
        "dev_mode": False,
    }
    config_file = sw_dir / "config.json"
    config_file.write_text(json.dumps(config_data, indent=2), encoding="utf-8")

    monkeypatch.setattr(Path, "home", lambda: fake_home)
    monkeypatch.delenv("STOPWATCH_HOME", raising=False)

    # ! reset global settings_manager state & point it at the isolated config
    from stopwatch.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = config_file

    # ! reset log sink to NullSink for test isolation
    from stopwatch.core.output import reset_sink

    reset_sink()

    yield fake_home

    reset_sink()


@pytest.fixture
def ticker_factory():
    # Manual ticker factory: engine ticks only when the test fires them
    return ManualTickerFactory()


@pytest.fixture
def engine(ticker_factory):
    from stopwatch.core.engine import StopwatchEngine

    eng = StopwatchEngine(ticker_factory=ticker_factory)
    yield eng
    eng.close()
