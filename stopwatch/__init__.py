# stopwatch/__init__.py
# Terminal stopwatch w/ lap recording

__version__ = "0.1.0"
