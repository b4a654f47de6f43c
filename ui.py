from asciimatics.effects import Effect
from asciimatics.screen import Screen

# Key codes that submit or edit the command line.
ENTER_KEYS = (10, 13)
BACKSPACE_KEYS = (Screen.KEY_BACK, 8, 127)


def frame_lines(rows):
    """Surrounds canvas rows with a +---+ / | | border."""
    width = len(rows[0]) if rows else 0
    edge = "+" + "-" * width + "+"
    return [edge] + ["|" + row + "|" for row in rows] + [edge]


class CommandLine:
    """
    Single-line input buffer fed one key code at a time.
    """
    def __init__(self, max_length=None):
        self.text = ""
        self.max_length = max_length

    def feed(self, key_code):
        """Applies a key; returns the finished line on Enter, else None."""
        if key_code in ENTER_KEYS:
            line, self.text = self.text, ""
            return line
        if key_code in BACKSPACE_KEYS:
            self.text = self.text[:-1]
        elif key_code >= 32 and chr(key_code).isprintable():
            # One char past the limit so the interpreter can report it.
            if self.max_length is None or len(self.text) <= self.max_length:
                self.text += chr(key_code)
        return None


class CanvasEffect(Effect):
    """Asciimatics Effect that draws the framed canvas in the top-left corner."""

    def __init__(self, screen, canvas):
        super().__init__(screen)
        self._canvas = canvas

    def reset(self):
        # Nothing to reset between scene restarts.
        pass

    def _update(self, frame_no):
        for row, line in enumerate(frame_lines(self._canvas.rows())):
            if row >= self._screen.height:
                break
            self._screen.print_at(line[: self._screen.width], 0, row)


class PromptEffect(Effect):
    """Draws the result of the last command and the input prompt below the canvas."""

    def __init__(self, screen, session, command_line):
        super().__init__(screen)
        self._session = session
        self._command_line = command_line
        self.result = None

    @property
    def top(self):
        return self._session.canvas.height + 2

    def reset(self):
        self.result = None

    def _update(self, frame_no):
        width = self._screen.width
        message = self.result.message if self.result is not None else ""
        colour = Screen.COLOUR_RED if self.result is not None and self.result.is_error else Screen.COLOUR_WHITE
        self._screen.print_at(message.ljust(width)[:width], 0, self.top, colour=colour)
        prompt = f"{len(self._session.history)} > {self._command_line.text}"
        self._screen.print_at(prompt.ljust(width)[:width], 0, self.top + 1)
