import random

import pytest

from canvas import Canvas
from conftest import marked
from rasterizer import draw_circle, draw_line, draw_rect


class TestLine:
    def test_diagonal(self, canvas: Canvas) -> None:
        draw_line(canvas, 0, 0, 4, 4)
        assert marked(canvas) == {(0, 0), (1, 1), (2, 2), (3, 3), (4, 4)}

    def test_single_point(self, canvas: Canvas) -> None:
        draw_line(canvas, 3, 1, 3, 1)
        assert marked(canvas) == {(3, 1)}

    def test_shallow_slope_truncates(self, canvas: Canvas) -> None:
        draw_line(canvas, 0, 0, 4, 1)
        assert marked(canvas) == {(0, 0), (1, 0), (2, 0), (3, 0), (4, 1)}

    def test_negative_steps_truncate_toward_zero(self, canvas: Canvas) -> None:
        # Floor division would drop y to 0 right after the start point.
        draw_line(canvas, 4, 1, 0, 0)
        assert marked(canvas) == {(4, 1), (3, 1), (2, 1), (1, 1), (0, 0)}

    def test_clipped_endpoints(self, canvas: Canvas) -> None:
        draw_line(canvas, -2, 2, 7, 2)
        assert marked(canvas) == {(x, 2) for x in range(5)}

    def test_entirely_outside(self, canvas: Canvas) -> None:
        draw_line(canvas, -10, -10, -1, -3)
        assert marked(canvas) == set()

    def test_huge_line_only_visits_visible_steps(self, canvas: Canvas) -> None:
        draw_line(canvas, 0, 0, 2_000_000_000, 0)
        draw_line(canvas, -2_000_000_000, 4, 2_000_000_000, 4)
        assert marked(canvas) == {(x, 0) for x in range(5)} | {(x, 4) for x in range(5)}

    def test_skipping_steps_changes_nothing(self) -> None:
        def every_step(canvas: Canvas, x0: int, y0: int, x1: int, y1: int) -> None:
            dx, dy = x1 - x0, y1 - y0
            n = max(abs(dx), abs(dy))
            canvas.set(x0, y0)
            for i in range(1, n + 1):
                canvas.set(x0 + int(i * dx / n), y0 + int(i * dy / n))

        rng = random.Random(7)
        for _ in range(300):
            coords = [rng.randint(-15, 20) for _ in range(4)]
            expected, actual = Canvas.create(6, 4), Canvas.create(6, 4)
            every_step(expected, *coords)
            draw_line(actual, *coords)
            assert actual.rows() == expected.rows(), coords


class TestRect:
    def test_outline(self, canvas: Canvas) -> None:
        draw_rect(canvas, 1, 1, 3, 2)
        assert canvas.rows() == [
            "     ",
            " *** ",
            " *** ",
            "     ",
            "     ",
        ]

    def test_hollow(self, canvas: Canvas) -> None:
        draw_rect(canvas, 0, 0, 5, 5)
        assert (2, 2) not in marked(canvas)
        assert len(marked(canvas)) == 16

    @pytest.mark.parametrize("w,h", [(0, 3), (3, 0), (-2, 2), (2, -2)])
    def test_degenerate_is_noop(self, canvas: Canvas, w: int, h: int) -> None:
        draw_rect(canvas, 1, 1, w, h)
        assert marked(canvas) == set()

    def test_partially_outside(self, canvas: Canvas) -> None:
        draw_rect(canvas, 3, 3, 4, 4)
        assert marked(canvas) == {(3, 3), (4, 3), (3, 4)}


class TestCircle:
    def test_unit_radius_hits_centre(self, canvas: Canvas) -> None:
        draw_circle(canvas, 2, 2, 1)
        assert marked(canvas) == {(2, 2), (3, 2), (1, 2), (2, 3), (2, 1)}

    def test_radius_two_extremes(self) -> None:
        canvas = Canvas.create(9, 9)
        draw_circle(canvas, 4, 4, 2)
        cells = marked(canvas)
        assert {(6, 4), (2, 4), (4, 6), (4, 2)} <= cells
        assert all(abs(x - 4) <= 2 and abs(y - 4) <= 2 for x, y in cells)

    @pytest.mark.parametrize("r", [0, -3])
    def test_non_positive_radius_is_noop(self, canvas: Canvas, r: int) -> None:
        draw_circle(canvas, 2, 2, r)
        assert marked(canvas) == set()

    def test_clipped(self, canvas: Canvas) -> None:
        draw_circle(canvas, 0, 0, 3)
        assert (3, 0) in marked(canvas)
        assert (0, 3) in marked(canvas)
