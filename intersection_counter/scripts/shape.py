"""
Shape classification of grown regions.

A region looks like a crossing when its four extreme pixels (min/max row,
min/max column) are mutually far apart. A single stroke collapses at least
two of them together.
"""

from itertools import combinations
from typing import Callable, NamedTuple, Optional, Sequence

from .utils import DEFAULT_SIMILARITY_THRESHOLD, Pixel, are_similar


class Extremes(NamedTuple):
    leftmost: Pixel
    rightmost: Pixel
    lowest: Pixel
    highest: Pixel


def _first_extreme(pixels: Sequence[Pixel], key: Callable[[Pixel], int], better) -> Optional[Pixel]:
    # Strict comparison keeps the first pixel met in iteration order on ties.
    best = None
    for p in pixels:
        if best is None or better(key(p), key(best)):
            best = p
    return best


def leftmost(pixels: Sequence[Pixel]) -> Optional[Pixel]:
    return _first_extreme(pixels, lambda p: p[0], lambda a, b: a < b)


def rightmost(pixels: Sequence[Pixel]) -> Optional[Pixel]:
    return _first_extreme(pixels, lambda p: p[0], lambda a, b: a > b)


def lowest(pixels: Sequence[Pixel]) -> Optional[Pixel]:
    return _first_extreme(pixels, lambda p: p[1], lambda a, b: a < b)


def highest(pixels: Sequence[Pixel]) -> Optional[Pixel]:
    return _first_extreme(pixels, lambda p: p[1], lambda a, b: a > b)


def find_extremes(pixels: Sequence[Pixel]) -> Optional[Extremes]:
    """
    Extract the four extreme pixels of a region.

    Args:
        pixels: Region pixels in BFS order

    Returns:
        Extremes, or None for an empty region
    """
    if not pixels:
        return None
    return Extremes(leftmost(pixels), rightmost(pixels), lowest(pixels), highest(pixels))


def is_intersection(
    pixels: Sequence[Pixel], threshold: int = DEFAULT_SIMILARITY_THRESHOLD
) -> bool:
    """
    Decide whether a region spreads out like a crossing.

    Returns False as soon as any two of the four extremes are similar.
    An empty region has no extremes to separate and is never a crossing.

    Example:
        >>> plus = [Pixel(10, c) for c in range(21)] + [Pixel(r, 10) for r in range(21)]
        >>> is_intersection(plus)
        True
        >>> is_intersection([Pixel(3, c) for c in range(30)])
        False
    """
    extremes = find_extremes(pixels)
    if extremes is None:
        return False
    for a, b in combinations(extremes, 2):
        if are_similar(a, b, threshold):
            return False
    return True


class ShapeClassifier:
    """Callable wrapper binding the closeness threshold."""

    def __init__(self, threshold: int = DEFAULT_SIMILARITY_THRESHOLD):
        self.threshold = threshold

    def __call__(self, pixels: Sequence[Pixel]) -> bool:
        return is_intersection(pixels, self.threshold)
