"""Result tags reported for every command, and the errors that map onto them."""
from enum import Enum
from typing import Optional


class Result(Enum):
    EXIT = ""
    LINE = "1 line drawn"
    RECT = "1 rectangle drawn"
    CIRCLE = "1 circle drawn"
    CHPEN = "pen changed"
    UNDO = "undo!"
    SAVE = "history saved"
    LOAD = "loaded history file"
    UNKNOWN = "error: unknown command"
    ERRNONINT = "Non-int value is included"
    ERRLACKARGS = "Too few arguments"
    ERRFILE = "file not open or command too long"
    NOCOMMAND = "No command in history"

    @property
    def message(self) -> str:
        return self.value

    @property
    def is_error(self) -> bool:
        return self in _ERRORS


_ERRORS = frozenset({
    Result.UNKNOWN, Result.ERRNONINT, Result.ERRLACKARGS,
    Result.ERRFILE, Result.NOCOMMAND,
})


class PaintError(Exception):
    """Base class for recoverable command failures."""
    result = Result.UNKNOWN


# Parse errors ---------------------------------------------------------------

class ParseError(PaintError):
    pass


class UnknownCommand(ParseError):
    result = Result.UNKNOWN


class MissingArguments(ParseError):
    result = Result.ERRLACKARGS


class NonIntegerArgument(ParseError):
    result = Result.ERRNONINT

    def __init__(self, token: str) -> None:
        super().__init__(f"not an integer: {token!r}")
        self.token = token


# State errors ---------------------------------------------------------------

class StateError(PaintError):
    pass


class EmptyHistory(StateError):
    result = Result.NOCOMMAND


# Persistence errors ---------------------------------------------------------

class PersistenceError(PaintError):
    result = Result.ERRFILE


class FileOpenFailed(PersistenceError):
    def __init__(self, filename: str, cause: Optional[OSError] = None) -> None:
        reason = cause.strerror if cause is not None and cause.strerror else "cannot open"
        super().__init__(f"cannot open {filename}: {reason}")
        self.filename = filename
        self.cause = cause


class FileAccessFailed(PersistenceError):
    """Reading or writing an already opened history file failed."""

    def __init__(self, filename: str, cause: Exception) -> None:
        super().__init__(f"cannot access {filename}: {cause}")
        self.filename = filename
        self.cause = cause


class CommandTooLong(PersistenceError):
    def __init__(self, limit: int, filename: Optional[str] = None, lineno: Optional[int] = None) -> None:
        where = f"{filename}:{lineno}: " if filename is not None else ""
        super().__init__(f"{where}command longer than {limit} characters")
        self.filename = filename
        self.lineno = lineno
        self.limit = limit


# Everything else ------------------------------------------------------------

class InvalidDimensions(PaintError, ValueError):
    """Canvas width and height must both be positive integers."""


class HistoryCorrupted(RuntimeError):
    """A previously accepted history entry failed when replayed."""

    def __init__(self, entry: str, cause: PaintError) -> None:
        super().__init__(f"history entry {entry!r} failed on replay: {cause}")
        self.entry = entry
        self.cause = cause
