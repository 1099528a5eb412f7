"""
Tests for the extreme-pixel shape heuristic.
"""

from intersection_counter.scripts.shape import (
    ShapeClassifier,
    find_extremes,
    highest,
    is_intersection,
    leftmost,
    lowest,
    rightmost,
)
from intersection_counter.scripts.utils import Pixel


def plus(center=10, arm=10):
    horizontal = [Pixel(center, c) for c in range(center - arm, center + arm + 1)]
    vertical = [Pixel(r, center) for r in range(center - arm, center + arm + 1)]
    return horizontal + vertical


class TestExtremes:
    def test_plus_extremes(self):
        ex = find_extremes(plus())
        assert ex.leftmost == (0, 10)
        assert ex.rightmost == (20, 10)
        assert ex.lowest == (10, 0)
        assert ex.highest == (10, 20)

    def test_ties_keep_first_encountered(self):
        pixels = [Pixel(0, 5), Pixel(0, 7), Pixel(3, 7), Pixel(3, 5)]
        assert leftmost(pixels) == (0, 5)
        assert rightmost(pixels) == (3, 7)
        assert lowest(pixels) == (0, 5)
        assert highest(pixels) == (0, 7)

    def test_empty_region_has_no_extremes(self):
        assert find_extremes([]) is None


class TestIsIntersection:
    def test_plus_is_intersection(self):
        assert is_intersection(plus())

    def test_horizontal_stroke_is_not(self):
        assert not is_intersection([Pixel(3, c) for c in range(40)])

    def test_vertical_stroke_is_not(self):
        assert not is_intersection([Pixel(r, 3) for r in range(40)])

    def test_small_plus_is_not(self):
        """Arms shorter than the closeness threshold collapse together."""
        assert not is_intersection(plus(arm=2))

    def test_empty_region_is_not(self):
        assert not is_intersection([])

    def test_single_pixel_is_not(self):
        assert not is_intersection([Pixel(4, 4)])

    def test_threshold_is_configurable(self):
        assert is_intersection(plus(arm=3), threshold=3)
        assert not ShapeClassifier(threshold=11)(plus(arm=10))

    def test_deterministic(self):
        pixels = plus() + [Pixel(0, 9), Pixel(20, 11)]
        results = {is_intersection(list(pixels)) for _ in range(5)}
        assert len(results) == 1
