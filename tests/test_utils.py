"""
Tests for pixel helpers, image loading and drawing.
"""

import numpy as np
import pytest
import rasterio
from rasterio.transform import from_origin

import cv2

from intersection_counter.scripts.utils import (
    INTERSECTION_COLOR,
    REDUNDANT_COLOR,
    Pixel,
    are_similar,
    draw_cross,
    draw_markers,
    draw_stroke,
    load_grayscale,
)

from conftest import blank


class TestAreSimilar:
    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ((0, 0), (0, 0), True),
            ((0, 0), (4, 4), True),
            ((0, 0), (5, 0), False),
            ((0, 0), (0, -5), False),
            ((10, 10), (6, 14), True),
            ((-3, 2), (1, -2), True),
        ],
    )
    def test_values(self, a, b, expected):
        assert are_similar(Pixel(*a), Pixel(*b)) is expected

    @pytest.mark.parametrize("a", [(0, 0), (3, 7), (-1, 4)])
    @pytest.mark.parametrize("b", [(0, 4), (5, 5), (2, 11), (-6, 4)])
    def test_symmetric(self, a, b):
        assert are_similar(Pixel(*a), Pixel(*b)) == are_similar(Pixel(*b), Pixel(*a))

    def test_custom_threshold(self):
        assert are_similar(Pixel(0, 0), Pixel(9, 9), threshold=10)


class TestLoadGrayscale:
    def test_png_roundtrip(self, tmp_path):
        image = blank(20, 30)
        image[5, 7] = 255
        path = tmp_path / "drawing.png"
        cv2.imwrite(str(path), image)
        assert np.array_equal(load_grayscale(path), image)

    def test_color_png_is_converted(self, tmp_path):
        image = np.zeros((8, 9, 3), dtype=np.uint8)
        image[2, 3] = (255, 255, 255)
        path = tmp_path / "color.png"
        cv2.imwrite(str(path), image)
        gray = load_grayscale(str(path))
        assert gray.shape == (8, 9)
        assert gray[2, 3] == 255 and gray[0, 0] == 0

    def test_geotiff(self, tmp_path):
        image = blank(12, 16)
        image[3, :] = 255
        path = tmp_path / "scan.tif"
        with rasterio.open(
            path,
            "w",
            driver="GTiff",
            height=12,
            width=16,
            count=1,
            dtype=image.dtype,
            transform=from_origin(0, 0, 1.0, 1.0),
        ) as dst:
            dst.write(image, 1)
        assert np.array_equal(load_grayscale(path), image)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_grayscale(tmp_path / "nope.png")

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "broken.png"
        path.write_text("not an image")
        with pytest.raises(ValueError, match="decode"):
            load_grayscale(path)


class TestDrawing:
    def test_stroke_is_one_pixel_wide(self):
        image = blank(10, 10)
        draw_stroke(image, (4, 1), (4, 8))
        assert np.count_nonzero(image) == 8
        assert np.all(image[4, 1:9] == 255)

    def test_stroke_is_clipped(self):
        image = blank(10, 10)
        draw_stroke(image, (-5, 3), (15, 3))
        assert np.count_nonzero(image) == 10

    def test_cross(self):
        image = blank(21, 21)
        draw_cross(image, (10, 10), 5)
        assert np.count_nonzero(image) == 21

    def test_markers(self):
        vis = draw_markers(blank(30, 30), [Pixel(10, 10)], [Pixel(20, 20)], radius=3)
        assert vis.shape == (30, 30, 3)
        assert tuple(vis[10, 10]) == INTERSECTION_COLOR
        assert tuple(vis[20, 23]) == REDUNDANT_COLOR
        assert tuple(vis[20, 20]) == (0, 0, 0)
