# stopwatch/cli/__init__.py
# Typer CLI entry point (console script: stopwatch = stopwatch.cli:app)

from .app import app

__all__ = ["app"]
