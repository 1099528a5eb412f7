"""
Binary Grid
===========

Boolean view of a decoded grayscale drawing with bounds-safe neighbor queries.
"""

from typing import List

import numpy as np

from .utils import WHITE_INTENSITY, Pixel


class BinaryGrid:
    """
    Rectangular field of "is this pixel white" flags.

    A pixel is white iff its source intensity equals ``WHITE_INTENSITY``.
    The grid is immutable after construction.

    Example:
        >>> gray = np.zeros((3, 4), dtype=np.uint8)
        >>> grid = BinaryGrid(gray)
        >>> grid.rows, grid.columns
        (3, 4)
        >>> grid.neighbors(Pixel(0, 0))
        [Pixel(row=1, col=0), Pixel(row=0, col=1)]
    """

    def __init__(self, gray: np.ndarray):
        """
        Build the grid from a 2D intensity buffer.

        Args:
            gray: Grayscale image (rows, columns)

        Raises:
            ValueError: If the buffer is not 2D or has no pixels
        """
        gray = np.asarray(gray)
        if gray.ndim != 2:
            raise ValueError(f"Expected a single-channel 2D image, got shape {gray.shape}")
        if gray.size == 0:
            raise ValueError("Image has no pixels.")

        self._is_white = gray == WHITE_INTENSITY
        self._is_white.setflags(write=False)

    @property
    def rows(self) -> int:
        return self._is_white.shape[0]

    @property
    def columns(self) -> int:
        return self._is_white.shape[1]

    @property
    def shape(self):
        return self._is_white.shape

    @property
    def mask(self) -> np.ndarray:
        """Read-only boolean array of white pixels."""
        return self._is_white

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def is_white(self, pixel: Pixel) -> bool:
        """
        Check whether a pixel is white.

        Raises:
            IndexError: If the pixel lies outside the grid
        """
        row, col = pixel
        if not self.contains(row, col):
            raise IndexError(f"Pixel {tuple(pixel)} outside {self.rows}x{self.columns} grid")
        return bool(self._is_white[row, col])

    def neighbors(self, pixel: Pixel) -> List[Pixel]:
        """
        Axis-aligned in-bounds neighbors in the order (+row), (+col), (-row), (-col).
        """
        row, col = pixel
        out = []
        for r, c in ((row + 1, col), (row, col + 1), (row - 1, col), (row, col - 1)):
            if self.contains(r, c):
                out.append(Pixel(r, c))
        return out
