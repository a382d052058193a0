# tests/integration/test_cli_config.py
# Integration tests for `stopwatch config` commands w/ isolated home

import json
from pathlib import Path

from typer.testing import CliRunner

from stopwatch.cli.app import app

ENV = {"NO_COLOR": "1", "TERM": "dumb"}


# * Verify config path points at the isolated config file
def test_config_path(isolate_config):
    result = CliRunner().invoke(app, ["config", "path"], env=ENV)

    assert result.exit_code == 0
    path = Path(result.stdout.strip())
    assert path == isolate_config / ".stopwatch" / "config.json"
    assert path.exists()


# * Verify set -> get round trip w/ JSON coercion
def test_config_set_get_round_trip(isolate_config):
    runner = CliRunner()

    result = runner.invoke(app, ["config", "set", "max_visible_laps", "4"], env=ENV)
    assert result.exit_code == 0, result.output
    result = runner.invoke(app, ["config", "get", "max_visible_laps"], env=ENV)
    assert result.stdout.strip() == "4"

    result = runner.invoke(app, ["config", "set", "show_key_hints", "false"], env=ENV)
    assert result.exit_code == 0, result.output
    result = runner.invoke(app, ["config", "get", "show_key_hints"], env=ENV)
    assert result.stdout.strip() == "false"

    result = runner.invoke(app, ["config", "set", "export_format", "json"], env=ENV)
    assert result.exit_code == 0, result.output
    result = runner.invoke(app, ["config", "get", "export_format"], env=ENV)
    assert result.stdout.strip() == '"json"'

    saved = json.loads((isolate_config / ".stopwatch" / "config.json").read_text())
    assert saved["max_visible_laps"] == 4
    assert saved["show_key_hints"] is False
    assert saved["export_format"] == "json"


# * Verify invalid values & unknown keys are rejected
def test_config_set_rejects_bad_input(isolate_config):
    runner = CliRunner()

    result = runner.invoke(app, ["config", "set", "refresh_per_second", "0"], env=ENV)
    assert result.exit_code != 0

    result = runner.invoke(app, ["config", "set", "tick_interval_ms", "5"], env=ENV)
    assert result.exit_code != 0

    result = runner.invoke(app, ["config", "get", "nope"], env=ENV)
    assert result.exit_code != 0


# * Verify listing shows every key
def test_config_list(isolate_config):
    result = CliRunner().invoke(app, ["config", "list"], env=ENV)
    assert result.exit_code == 0
    for key in ("theme", "refresh_per_second", "max_visible_laps", "export_format"):
        assert key in result.stdout


# * Verify reset w/ --yes restores defaults
def test_config_reset(isolate_config):
    runner = CliRunner()
    runner.invoke(app, ["config", "set", "theme", "forest"], env=ENV)

    result = runner.invoke(app, ["config", "reset", "--yes"], env=ENV)
    assert result.exit_code == 0

    result = runner.invoke(app, ["config", "get", "theme"], env=ENV)
    assert result.stdout.strip() == '"midnight"'


# * Verify declining the reset prompt keeps settings
def test_config_reset_declined(isolate_config):
    runner = CliRunner()
    runner.invoke(app, ["config", "set", "theme", "forest"], env=ENV)

    result = runner.invoke(app, ["config", "reset"], input="n\n", env=ENV)
    assert result.exit_code == 1

    result = runner.invoke(app, ["config", "get", "theme"], env=ENV)
    assert result.stdout.strip() == '"forest"'


# * Verify a numeric export_dir is refused & the stored value stays a path string
def test_config_set_numeric_export_dir(isolate_config):
    runner = CliRunner()

    result = runner.invoke(app, ["config", "set", "export_dir", "2024"], env=ENV)
    assert result.exit_code != 0

    result = runner.invoke(app, ["config", "get", "export_dir"], env=ENV)
    assert result.stdout.strip() == '"laps"'

    # quoted JSON keeps the digits as a directory name
    result = runner.invoke(app, ["config", "set", "export_dir", '"2024"'], env=ENV)
    assert result.exit_code == 0, result.output
    result = runner.invoke(app, ["config", "get", "export_dir"], env=ENV)
    assert result.stdout.strip() == '"2024"'
