"""ascii-paint: draw on a fixed-size character canvas with typed commands.

Run:
  python main.py 40 20
  python main.py 40 20 --pen '#' --load history.txt --export drawing.png

Commands: line x0 y0 x1 y1 | rect x y w h | circle x y r | chpen C |
undo | save [file] | load [file] | quit
"""
import argparse
import sys
import time
from typing import List, Optional

from asciimatics.event import KeyboardEvent
from asciimatics.exceptions import ResizeScreenError
from asciimatics.scene import Scene
from asciimatics.screen import Screen

from config import DEFAULT_PEN
from errors import HistoryCorrupted, InvalidDimensions, MissingArguments, PaintError, Result
from interpreter import Interpreter, validate_pen
from logger import setup_logger
from ui import CanvasEffect, CommandLine, PromptEffect


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ascii-paint", description="Command-driven ASCII drawing tool.")
    parser.add_argument("width", type=int, help="canvas width in characters")
    parser.add_argument("height", type=int, help="canvas height in characters")
    parser.add_argument("--pen", default=DEFAULT_PEN, help="initial pen character")
    parser.add_argument("--load", metavar="FILE", help="history file to load before starting")
    parser.add_argument("--export", metavar="PNG", help="write the final canvas to a PNG file on exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="also log to stderr")
    return parser


def paint(screen: Screen, session: Interpreter, initial: Optional[Result] = None) -> None:
    command_line = CommandLine(session.max_command_length)
    prompt = PromptEffect(screen, session, command_line)
    screen.set_scenes([Scene([CanvasEffect(screen, session.canvas), prompt], duration=-1)])
    prompt.result = initial

    while True:
        if screen.has_resized():
            raise ResizeScreenError("Screen resized")

        event = screen.get_event()
        if isinstance(event, KeyboardEvent):
            line = command_line.feed(event.key_code)
            if line is not None:
                result = session.execute(line)
                if result is Result.EXIT:
                    return
                prompt.result = result

        screen.draw_next_frame()

        # Input only needs a modest refresh rate.
        time.sleep(1 / 30)


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logger(console=args.verbose)

    try:
        validate_pen(args.pen)
    except MissingArguments as e:
        print(f"ascii-paint: invalid pen: {e}", file=sys.stderr)
        return 1
    try:
        session = Interpreter.create(args.width, args.height, args.pen)
    except InvalidDimensions as e:
        print(f"ascii-paint: {e}", file=sys.stderr)
        return 1
    logger.info(f"Session started on a {args.width}x{args.height} canvas")

    initial = None
    if args.load:
        try:
            initial = session.load(args.load)
        except PaintError as e:
            logger.warning(f"Startup load of {args.load} failed: {e}")
            initial = e.result

    try:
        while True:
            try:
                Screen.wrapper(paint, arguments=[session, initial])
                break
            except ResizeScreenError:
                initial = None
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except (MemoryError, HistoryCorrupted) as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        print(f"ascii-paint: fatal: {e}", file=sys.stderr)
        return 1

    if args.export:
        try:
            session.canvas.save_to_png(args.export)
        except OSError as e:
            logger.error(f"Cannot export {args.export}: {e}")
            print(f"ascii-paint: cannot export {args.export}: {e}", file=sys.stderr)
            return 1
        logger.info(f"Canvas exported to {args.export}")

    logger.info(f"Session ended with {len(session.history)} history entries")
    return 0


if __name__ == "__main__":
    sys.exit(run())
