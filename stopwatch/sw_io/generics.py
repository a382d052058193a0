# stopwatch/sw_io/generics.py
# Filesystem helpers for config & lap export files

from pathlib import Path
from typing import Any, Union
import json

from ..core.exceptions import FileWriteError, JSONParsingError
from ..core.verbose import vlog_file_read, vlog_file_write


def ensure_parent(path: Union[Path, str]) -> None:
    # create parent directories for any file path
    Path(path).parent.mkdir(parents=True, exist_ok=True)


# write text w/ UTF-8 encoding, creating parent dirs; OS failures become FileWriteError
def write_text_safe(content: str, path: Path) -> None:
    try:
        ensure_parent(path)
        Path(path).write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileWriteError(f"Could not write {path}: {e}", path) from e
    vlog_file_write(path, len(content))


# write JSON w/ UTF-8 encoding, creating parent dirs as needed
def write_json_safe(obj: dict[str, Any], path: Path) -> None:
    write_text_safe(json.dumps(obj, indent=2), path)


# read JSON w/ UTF-8 encoding, return dict
def read_json_safe(path: Path) -> dict[str, Any]:
    text = Path(path).read_text(encoding="utf-8")
    vlog_file_read(path, len(text))
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        # trimmed snippet around the offending line (JSONDecodeError lines are 1-based)
        lines = text.split("\n")
        line_num = e.lineno - 1
        snippet_start = max(0, line_num - 2)
        snippet_end = min(len(lines), line_num + 3)

        numbered_lines = []
        for i, line in enumerate(lines[snippet_start:snippet_end], start=snippet_start + 1):
            marker = ">>> " if i == e.lineno else "    "
            numbered_lines.append(f"{marker}{i:3}: {line}")

        snippet = "\n".join(numbered_lines)
        raise JSONParsingError(f"Invalid JSON in {path}:\n{snippet}\nError: {e.msg}")

    if not isinstance(data, dict):
        raise JSONParsingError(
            f"Expected a JSON object in {path}, got {type(data).__name__}"
        )
    return data


# exit CLI w/ standardized error handling
def exit_with_error(msg: str, code: int = 1) -> None:
    # local import keeps typer out of non-CLI callers
    import typer

    typer.echo(msg, err=True)
    raise typer.Exit(code)
