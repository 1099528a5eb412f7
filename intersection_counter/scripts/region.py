"""
Region Growing
==============

Bounded breadth-first flood fill from a seed pixel.

The fill walks 4-connected pixels regardless of color and keeps the black
ones. It stops once it has seen roughly one junction's worth of geometry:
either the absolute bound is hit, or the lower bound is reached while white
pixels are at least as numerous as black ones.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .grid import BinaryGrid
from .utils import DEFAULT_MAX_ITERATIONS, DEFAULT_MIN_ITERATIONS, Pixel


@dataclass
class Region:
    """
    Black pixels collected by one bounded flood fill.

    Attributes:
        seed: Pixel the fill started from
        pixels: Black pixels in breadth-first visitation order
        white_count: White pixels dequeued
        black_count: Black pixels dequeued, plus one for the seed
    """

    seed: Pixel
    pixels: List[Pixel] = field(default_factory=list)
    white_count: int = 0
    black_count: int = 1

    @property
    def visits(self) -> int:
        return self.white_count + self.black_count


class RegionGrower:
    """
    Bounded BFS over a BinaryGrid.

    The visited buffer is allocated once per grid and cleared before every
    fill, so one grower can be reused for a whole sweep.

    Example:
        >>> grower = RegionGrower(grid)
        >>> region = grower.grow(Pixel(10, 10))
        >>> len(region.pixels) <= 400
        True
    """

    def __init__(
        self,
        grid: BinaryGrid,
        min_iterations: int = DEFAULT_MIN_ITERATIONS,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
    ):
        self.grid = grid
        self.min_iterations = min_iterations
        self.max_iterations = max_iterations
        self._visited: Optional[np.ndarray] = None

    def _should_stop(self, white: int, black: int) -> bool:
        total = white + black
        if total >= self.max_iterations:
            return True
        return total >= self.min_iterations and white // black != 0

    def _reset_visited(self) -> np.ndarray:
        if self._visited is None or self._visited.shape != self.grid.shape:
            self._visited = np.zeros(self.grid.shape, dtype=bool)
        else:
            self._visited.fill(False)
        return self._visited

    def grow(self, seed: Pixel) -> Region:
        """
        Flood fill from ``seed`` and collect the black pixels reached.

        The seed always counts as one black unit in the stopping ratio,
        whatever its color.

        Args:
            seed: Start pixel (in bounds)

        Returns:
            Region with the black pixels in BFS order
        """
        seed = Pixel(*seed)
        if not self.grid.contains(*seed):
            raise IndexError(f"Seed {tuple(seed)} outside {self.grid.rows}x{self.grid.columns} grid")

        visited = self._reset_visited()
        region = Region(seed=seed)
        queue = deque([seed])
        visited[seed] = True

        while queue and not self._should_stop(region.white_count, region.black_count):
            pixel = queue.popleft()
            if self.grid.is_white(pixel):
                region.white_count += 1
            else:
                region.black_count += 1
                region.pixels.append(pixel)
            for p in self.grid.neighbors(pixel):
                if not visited[p]:
                    visited[p] = True
                    queue.append(p)

        return region
