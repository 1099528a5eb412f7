"""Shared builders for synthetic line drawings."""

import numpy as np
import pytest

from intersection_counter.scripts.utils import STROKE_INTENSITY, draw_cross, draw_stroke


def blank(rows: int, cols: int) -> np.ndarray:
    """All-white canvas (intensity 0 everywhere)."""
    return np.zeros((rows, cols), dtype=np.uint8)


def cross_image(rows: int, cols: int, centers, arm: int = 20) -> np.ndarray:
    image = blank(rows, cols)
    for center in centers:
        draw_cross(image, center, arm)
    return image


@pytest.fixture
def single_cross():
    return cross_image(110, 110, [(52, 52)])


@pytest.fixture
def two_crosses():
    return cross_image(210, 210, [(52, 52), (152, 152)])


@pytest.fixture
def horizontal_line():
    image = blank(120, 130)
    draw_stroke(image, (52, 10), (52, 110))
    return image


@pytest.fixture
def all_black():
    return np.full((50, 50), STROKE_INTENSITY, dtype=np.uint8)
