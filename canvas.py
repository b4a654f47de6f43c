import numpy as np
from PIL import Image, ImageDraw, ImageFont

from config import BLANK, CELL_HEIGHT, CELL_WIDTH, DEFAULT_PEN
from errors import InvalidDimensions


class Canvas:
    """
    Fixed-size character grid plus the pen used for every mark.

    Cells are stored row-major, so the character at (x, y) lives at
    ``grid[y, x]``.
    """
    def __init__(self, width, height, pen=DEFAULT_PEN):
        self.width = width
        self.height = height
        self.pen = pen
        self.grid = np.full((height, width), BLANK, dtype="<U1")

    @classmethod
    def create(cls, width, height, pen=DEFAULT_PEN):
        """Creates a blank canvas, rejecting non-positive dimensions."""
        for value in (width, height):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidDimensions(f"dimension must be an integer, got {value!r}")
        if width <= 0 or height <= 0:
            raise InvalidDimensions(f"invalid canvas size {width}x{height}")
        return cls(int(width), int(height), pen)

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def reset(self):
        """Blanks every cell. Pen and dimensions are kept."""
        self.grid.fill(BLANK)

    def set(self, x, y):
        """Marks (x, y) with the pen; out-of-range points are clipped."""
        if self.in_bounds(x, y):
            self.grid[y, x] = self.pen

    def set_pen(self, ch):
        self.pen = ch

    def snapshot(self):
        """Returns a copy of the grid for rendering or comparison."""
        return self.grid.copy()

    def rows(self):
        return ["".join(row) for row in self.grid]

    def __str__(self):
        return "\n".join(self.rows())

    def save_to_png(self, filename="drawing.png", cell_width=CELL_WIDTH, cell_height=CELL_HEIGHT):
        """Saves the canvas to a PNG file, one text cell per grid character."""
        img = Image.new("RGB", (self.width * cell_width, self.height * cell_height), "white")
        draw = ImageDraw.Draw(img)
        font = ImageFont.load_default()
        for y, row in enumerate(self.rows()):
            for x, ch in enumerate(row):
                if ch != BLANK:
                    draw.text((x * cell_width, y * cell_height), ch, fill="black", font=font)
        img.save(filename)
        return img.size
