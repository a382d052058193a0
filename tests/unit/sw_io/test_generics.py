# tests/unit/sw_io/test_generics.py
# Unit tests for JSON/text file helpers & CLI exit helper

import json

import pytest
import typer

from stopwatch.core.exceptions import FileWriteError, JSONParsingError
from stopwatch.sw_io.generics import (
    ensure_parent,
    exit_with_error,
    read_json_safe,
    write_json_safe,
    write_text_safe,
)


# * Verify parent directories are created
def test_ensure_parent(tmp_path):
    target = tmp_path / "a" / "b" / "file.txt"
    ensure_parent(target)
    assert target.parent.is_dir()


# * Verify JSON written w/ indentation can be read back
def test_write_then_read_json(tmp_path):
    path = tmp_path / "out" / "data.json"
    write_json_safe({"laps": ["1 LAP : 0.5"]}, path)

    assert json.loads(path.read_text(encoding="utf-8")) == {"laps": ["1 LAP : 0.5"]}
    assert read_json_safe(path) == {"laps": ["1 LAP : 0.5"]}


# * Verify invalid JSON raises w/ a numbered snippet
def test_read_invalid_json_has_snippet(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{\n  "theme": "midnight",\n  "oops"\n}\n', encoding="utf-8")

    with pytest.raises(JSONParsingError) as exc:
        read_json_safe(path)
    message = str(exc.value)
    assert ">>> " in message
    assert '"oops"' in message


# * Verify non-object JSON is rejected
def test_read_json_requires_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(JSONParsingError, match="Expected a JSON object"):
        read_json_safe(path)


# * Verify OS errors surface as FileWriteError w/ the path
def test_write_text_failure_raises_file_write_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a directory")

    with pytest.raises(FileWriteError) as exc:
        write_text_safe("x", blocker / "child.txt")
    assert exc.value.path == blocker / "child.txt"


# * Verify exit_with_error exits w/ the given code
def test_exit_with_error(capsys):
    with pytest.raises(typer.Exit) as exc:
        exit_with_error("nope", code=3)
    assert exc.value.exit_code == 3
    assert "nope" in capsys.readouterr().err
