import pytest

from canvas import Canvas
from interpreter import Interpreter


@pytest.fixture
def canvas() -> Canvas:
    return Canvas.create(5, 5, "*")


@pytest.fixture
def session() -> Interpreter:
    return Interpreter.create(5, 5, "*")


def marked(canvas: Canvas) -> set:
    """Coordinates of every non-blank cell."""
    return {(x, y) for y, row in enumerate(canvas.rows()) for x, ch in enumerate(row) if ch != " "}
