"""Plain-text storage of a session history.

The file holds one raw command per line, in history order, with no header.
"""
from typing import Optional

from config import DEFAULT_HISTORY_FILE
from errors import (
    CommandTooLong,
    FileAccessFailed,
    FileOpenFailed,
    MissingArguments,
    NonIntegerArgument,
    UnknownCommand,
)
from history import History
from logger import get_logger

logger = get_logger()

LOADABLE_VERBS = ("line", "rect", "circle", "chpen")


def save_history(history: History, filename: Optional[str] = None) -> int:
    """Writes every history entry to `filename`. Returns the entry count."""
    filename = filename or DEFAULT_HISTORY_FILE
    try:
        fp = open(filename, "w", encoding="utf-8")
    except OSError as e:
        logger.error(f"Cannot open {filename} for writing: {e}")
        raise FileOpenFailed(filename, e) from e
    try:
        with fp:
            for entry in history:
                fp.write(entry + "\n")
    except OSError as e:
        logger.error(f"Cannot write {filename}: {e}")
        raise FileAccessFailed(filename, e) from e
    logger.info(f"Saved {len(history)} entries to {filename}")
    return len(history)


def load_history(session, filename: Optional[str] = None) -> int:
    """Replaces the session's canvas and history with the contents of `filename`.

    Each line whose verb draws is applied as if typed, so it lands in the
    fresh history only when it succeeds. Other verbs and blank lines are
    skipped. A line with missing or non-integer arguments, or one that
    cannot be read or decoded, stops the load; whatever was applied before
    it stays applied. Returns the number of entries loaded.
    """
    filename = filename or DEFAULT_HISTORY_FILE
    limit = session.max_command_length
    try:
        fp = open(filename, "r", encoding="utf-8")
    except OSError as e:
        logger.error(f"Cannot open {filename} for reading: {e}")
        raise FileOpenFailed(filename, e) from e

    with fp:
        session.restart()
        session.history.clear()
        try:
            for lineno, raw in enumerate(fp, start=1):
                _load_line(session, filename, lineno, raw.rstrip("\r\n"), limit)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"{filename}: read failed after {len(session.history)} entries: {e}")
            raise FileAccessFailed(filename, e) from e

    logger.info(f"Loaded {len(session.history)} entries from {filename}")
    return len(session.history)


def _load_line(session, filename: str, lineno: int, line: str, limit: int) -> None:
    if len(line) > limit:
        logger.error(f"{filename}:{lineno}: command too long")
        raise CommandTooLong(limit, filename, lineno)
    tokens = line.split()
    if not tokens or tokens[0] not in LOADABLE_VERBS:
        logger.debug(f"{filename}:{lineno}: skipped {line!r}")
        return
    try:
        session.apply(line)
    except (MissingArguments, NonIntegerArgument) as e:
        logger.warning(f"{filename}:{lineno}: load stopped at {line!r}: {e}")
        raise
    except UnknownCommand as e:
        logger.warning(f"{filename}:{lineno}: skipped {line!r}: {e}")
