"""Command interpreter for the paint session.

A session owns one `Canvas` and one `History`. Every drawing command that
succeeds through `Interpreter.apply` is appended to the history; `undo`
rebuilds the canvas by replaying all but the last entry through
`Interpreter.apply_silent`, which never touches the history.
"""
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import persistence
import rasterizer
from canvas import Canvas
from config import DEFAULT_PEN, MAX_COMMAND_LENGTH
from errors import (
    CommandTooLong,
    EmptyHistory,
    HistoryCorrupted,
    MissingArguments,
    NonIntegerArgument,
    PaintError,
    Result,
    UnknownCommand,
)
from history import History
from logger import get_logger

logger = get_logger()

# Verbs that change the canvas and are therefore recorded.
DRAWING_VERBS = ("line", "rect", "circle", "chpen")

_INT_RE = re.compile(r"[+-]?[0-9]+")

# verb -> number of integer arguments
_ARITY = {"line": 4, "rect": 4, "circle": 3}


@dataclass(frozen=True)
class Command:
    verb: str
    args: Tuple
    text: str

    @property
    def is_drawing(self) -> bool:
        return self.verb in DRAWING_VERBS


def normalize(line: str) -> str:
    """Strips the line terminator; the rest is kept verbatim."""
    return line.rstrip("\r\n")


def parse_int(token: str) -> int:
    """Parses a whole token as a base-10 integer, sign allowed."""
    if not _INT_RE.fullmatch(token):
        raise NonIntegerArgument(token)
    return int(token)


def validate_pen(pen: str) -> str:
    """Accepts exactly one visible, non-whitespace character."""
    if len(pen) != 1 or pen.isspace() or not pen.isprintable():
        raise MissingArguments(f"pen must be one visible character, got {pen!r}")
    return pen


def _parse_pen(tokens) -> str:
    if not tokens:
        raise MissingArguments("chpen needs a pen character")
    pen = validate_pen(tokens[0])
    if len(tokens) > 1:
        raise UnknownCommand("chpen takes a single argument")
    return pen


def parse_command(line: str) -> Command:
    """Splits a command line into a verb and validated arguments.

    Integer verbs read exactly as many arguments as they need; the
    remaining tokens are ignored. Raises a `ParseError` on bad input.
    """
    text = normalize(line)
    tokens = text.split()
    if not tokens:
        raise UnknownCommand("empty command")
    verb, rest = tokens[0], tokens[1:]

    if verb in _ARITY:
        arity = _ARITY[verb]
        if len(rest) < arity:
            raise MissingArguments(f"{verb} needs {arity} arguments, got {len(rest)}")
        return Command(verb, tuple(parse_int(t) for t in rest[:arity]), text)
    if verb == "chpen":
        return Command(verb, (_parse_pen(rest),), text)
    if verb in ("save", "load"):
        if verb == "load" and len(rest) > 1:
            raise UnknownCommand("load takes at most one filename")
        return Command(verb, tuple(rest[:1]), text)
    if verb in ("undo", "quit"):
        return Command(verb, (), text)
    raise UnknownCommand(f"unknown command {verb!r}")


class Interpreter:
    """
    Runs commands against a canvas and records the ones that draw.
    """

    def __init__(self, canvas: Canvas, history: Optional[History] = None,
                 seed_pen: bool = True, max_command_length: int = MAX_COMMAND_LENGTH) -> None:
        self.canvas = canvas
        self.initial_pen = canvas.pen
        self.max_command_length = max_command_length
        if history is None:
            history = History()
            if seed_pen:
                history.append(f"chpen {canvas.pen}")
        self.history = history

    @classmethod
    def create(cls, width: int, height: int, pen: str = DEFAULT_PEN, **kwargs) -> "Interpreter":
        return cls(Canvas.create(width, height, pen), **kwargs)

    # Entry points -----------------------------------------------------------

    def apply(self, line: str) -> Result:
        """Runs one command and records it if it drew. Raises on failure."""
        return self._run(line, record=True)

    def apply_silent(self, line: str) -> Result:
        """Runs one command without recording it. Used by replay."""
        return self._run(line, record=False)

    def execute(self, line: str) -> Result:
        """Runs one interactive command and reports its result tag."""
        try:
            return self.apply(line)
        except PaintError as e:
            logger.warning(f"{normalize(line)!r} rejected: {e}")
            return e.result

    # Session operations -----------------------------------------------------

    def restart(self) -> None:
        """Blank canvas with the pen the session started with."""
        self.canvas.reset()
        self.canvas.set_pen(self.initial_pen)

    def replay(self, entries: Iterable[str]) -> None:
        """Rebuilds the canvas from scratch by re-running `entries` in order."""
        self.restart()
        for entry in entries:
            try:
                self.apply_silent(entry)
            except PaintError as e:
                logger.error(f"Replay failed on {entry!r}: {e}")
                raise HistoryCorrupted(entry, e) from e

    def undo(self) -> Result:
        if not len(self.history):
            raise EmptyHistory("no command in history")
        self.replay(self.history.entries[:-1])
        dropped = self.history.pop()
        logger.info(f"Undo {dropped!r}, {len(self.history)} entries left")
        return Result.UNDO

    def save(self, filename: Optional[str] = None) -> Result:
        persistence.save_history(self.history, filename)
        return Result.SAVE

    def load(self, filename: Optional[str] = None) -> Result:
        persistence.load_history(self, filename)
        return Result.LOAD

    # Dispatch ---------------------------------------------------------------

    def _run(self, line: str, record: bool) -> Result:
        text = normalize(line)
        if len(text) > self.max_command_length:
            raise CommandTooLong(self.max_command_length)
        command = parse_command(text)
        logger.debug(f"{'apply' if record else 'replay'} {text!r}")
        result = self._dispatch(command)
        if record and command.is_drawing:
            self.history.append(command.text)
        return result

    def _dispatch(self, command: Command) -> Result:
        verb, args = command.verb, command.args
        if verb == "line":
            rasterizer.draw_line(self.canvas, *args)
            return Result.LINE
        elif verb == "rect":
            rasterizer.draw_rect(self.canvas, *args)
            return Result.RECT
        elif verb == "circle":
            rasterizer.draw_circle(self.canvas, *args)
            return Result.CIRCLE
        elif verb == "chpen":
            self.canvas.set_pen(args[0])
            return Result.CHPEN
        elif verb == "save":
            return self.save(*args)
        elif verb == "load":
            return self.load(*args)
        elif verb == "undo":
            return self.undo()
        elif verb == "quit":
            return Result.EXIT
        raise UnknownCommand(f"unknown command {verb!r}")
