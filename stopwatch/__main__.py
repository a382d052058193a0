# stopwatch/__main__.py
# `python -m stopwatch` entry point

from .cli import app

if __name__ == "__main__":
    app()
