# stopwatch/core/exceptions.py
# Custom exception hierarchy for the stopwatch CLI (pure - no I/O operations)
# ! StopwatchEngine itself never raises; these cover config, files & exports

from pathlib import Path


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for the stopwatch application
class StopwatchError(Exception):
    pass


# * JSON parsing errors
class JSONParsingError(StopwatchError):
    pass


# * Lap export format not supported
class UnsupportedFormatError(StopwatchError):
    def __init__(self, message: str, format: str):
        super().__init__(message)
        self.format = format

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, format={self.format!r})"


# * Base error for file I/O operations
class FileOperationError(StopwatchError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Failed to write file
class FileWriteError(FileOperationError):
    pass
