"""Line, rectangle and circle rasterization onto a `Canvas`.

Every routine computes its sample points and hands them to ``Canvas.set``,
which clips points outside the grid.
"""
import math

from canvas import Canvas


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _steps_within(start: int, delta: int, n: int, size: int) -> tuple:
    """Bounds of the steps i in [1, n] whose coordinate may land in [0, size).

    The bounds are loose by at least one step on each side; truncation moves
    a point by less than one cell.
    """
    if delta == 0:
        return (1, n) if 0 <= start < size else (1, 0)
    a = (-start - 1) * n
    b = (size - start) * n
    if delta < 0:
        a, b, delta = -b, -a, -delta
    return max(1, a // delta), min(n, -(-b // delta))


def draw_line(canvas: Canvas, x0: int, y0: int, x1: int, y1: int) -> None:
    """Marks n + 1 evenly spaced points from (x0, y0) to (x1, y1).

    n is the larger of the two deltas. Intermediate points are
    ``x0 + i * dx / n`` with the division truncated toward zero. Steps that
    cannot reach the canvas are skipped, so huge lines stay cheap.
    """
    dx = x1 - x0
    dy = y1 - y0
    n = max(abs(dx), abs(dy))
    canvas.set(x0, y0)
    if n == 0:
        return
    x_lo, x_hi = _steps_within(x0, dx, n, canvas.width)
    y_lo, y_hi = _steps_within(y0, dy, n, canvas.height)
    for i in range(max(x_lo, y_lo), min(x_hi, y_hi) + 1):
        canvas.set(x0 + _trunc_div(i * dx, n), y0 + _trunc_div(i * dy, n))


def draw_rect(canvas: Canvas, x0: int, y0: int, width: int, height: int) -> None:
    """Draws the outline of the box with top-left corner (x0, y0)."""
    if width <= 0 or height <= 0:
        return
    x1 = x0 + width - 1
    y1 = y0 + height - 1
    draw_line(canvas, x0, y0, x1, y0)
    draw_line(canvas, x0, y1, x1, y1)
    draw_line(canvas, x0, y0, x0, y1)
    draw_line(canvas, x1, y0, x1, y1)


def draw_circle(canvas: Canvas, x0: int, y0: int, r: int) -> None:
    """Samples the circle once per whole degree.

    Offsets are truncated toward zero, so small circles show gaps and
    large ones repeat cells.
    """
    if r <= 0:
        return
    for deg in range(360):
        rad = deg * math.pi / 180.0
        canvas.set(x0 + int(r * math.cos(rad)), y0 + int(r * math.sin(rad)))
