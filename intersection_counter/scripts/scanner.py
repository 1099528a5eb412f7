"""
Intersection Scanner - Main Module
==================================

High-level interface for counting intersections in binary line drawings.

The scanner sweeps the grid on a fixed stride, probes every white sample
with a bounded flood fill, keeps the seeds whose region looks like a crossing
and finally drops candidates that sit close to an earlier one.

Quick Start:
    >>> from intersection_counter import IntersectionScanner
    >>>
    >>> scanner = IntersectionScanner()
    >>> result = scanner.process_image("network.png")
    >>> print(result.count)
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
import cv2

from .grid import BinaryGrid
from .region import RegionGrower
from .shape import ShapeClassifier
from .utils import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_MIN_ITERATIONS,
    DEFAULT_ROW_SKIP,
    DEFAULT_SIMILARITY_THRESHOLD,
    DEFAULT_STEP,
    Pixel,
    append_results_csv,
    are_similar,
    draw_markers,
    load_grayscale,
)

logger = logging.getLogger(__name__)


def mark_redundant(
    candidates: Sequence[Pixel], threshold: int = DEFAULT_SIMILARITY_THRESHOLD
) -> List[bool]:
    """
    Flag candidates that sit near an earlier candidate.

    For every pair i < j, candidate j is flagged when the two are similar.

    Args:
        candidates: Candidate pixels in sweep order
        threshold: Closeness threshold in pixels

    Returns:
        List of flags parallel to ``candidates``
    """
    redundant = [False] * len(candidates)
    for i in range(len(candidates)):
        for j in range(i + 1, len(candidates)):
            if are_similar(candidates[i], candidates[j], threshold):
                redundant[j] = True
    return redundant


def deduplicate(
    candidates: Sequence[Pixel], threshold: int = DEFAULT_SIMILARITY_THRESHOLD
) -> List[Pixel]:
    """Return the candidates that survive ``mark_redundant``, in order."""
    flags = mark_redundant(candidates, threshold)
    return [p for p, bad in zip(candidates, flags) if not bad]


@dataclass
class ScanResult:
    """
    Results of one intersection scan.

    Attributes:
        shape: Grid shape (rows, columns)
        candidates: Seeds classified as intersections, in sweep order
        redundant: Flags parallel to ``candidates`` marking duplicates
        image_path: Source image, when the scan came from a file
        annotated_path: Path to the saved annotated image, if any
    """

    shape: Tuple[int, int]
    candidates: List[Pixel] = field(default_factory=list)
    redundant: List[bool] = field(default_factory=list)
    image_path: Optional[Path] = None
    annotated_path: Optional[Path] = None

    @property
    def intersections(self) -> List[Pixel]:
        return [p for p, bad in zip(self.candidates, self.redundant) if not bad]

    @property
    def count(self) -> int:
        return sum(1 for bad in self.redundant if not bad)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "image_path": str(self.image_path) if self.image_path else None,
            "annotated_path": str(self.annotated_path) if self.annotated_path else None,
            "rows": int(self.shape[0]),
            "columns": int(self.shape[1]),
            "count": self.count,
            "intersections": [[p.row, p.col] for p in self.intersections],
            "candidates": [
                {"row": p.row, "col": p.col, "redundant": bad}
                for p, bad in zip(self.candidates, self.redundant)
            ],
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


class IntersectionScanner:
    """
    Main class for counting intersections in a line drawing.

    Attributes:
        step: Sweep stride in pixels (default: 5)
        min_iterations: Flood fill size after which a balanced region stops (default: 200)
        max_iterations: Absolute flood fill bound (default: 400)
        similarity_threshold: Closeness threshold for extremes and candidates (default: 5)
        row_skip: Extra rows skipped after a candidate is found (default: 20)

    Example:
        >>> scanner = IntersectionScanner()
        >>> result = scanner.scan_image(gray)
        >>> result.count
        1
    """

    def __init__(
        self,
        step: int = DEFAULT_STEP,
        min_iterations: int = DEFAULT_MIN_ITERATIONS,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        similarity_threshold: int = DEFAULT_SIMILARITY_THRESHOLD,
        row_skip: int = DEFAULT_ROW_SKIP,
    ):
        if step <= 0:
            raise ValueError(f"step must be positive, got {step}")
        self.step = step
        self.min_iterations = min_iterations
        self.max_iterations = max_iterations
        self.similarity_threshold = similarity_threshold
        self.row_skip = row_skip
        self.classifier = ShapeClassifier(similarity_threshold)

    def find_candidates(self, grid: BinaryGrid) -> List[Pixel]:
        """
        Sweep the grid and collect seeds classified as intersections.

        After a hit the row cursor jumps ahead by ``row_skip`` and the
        current column pass continues on the new row.

        Args:
            grid: Binary grid to scan

        Returns:
            Candidate pixels in sweep order
        """
        grower = RegionGrower(grid, self.min_iterations, self.max_iterations)
        candidates: List[Pixel] = []

        row = 0
        while row < grid.rows:
            col = 0
            while col < grid.columns:
                if row >= grid.rows:
                    break
                seed = Pixel(row, col)
                if grid.is_white(seed):
                    region = grower.grow(seed)
                    if self.classifier(region.pixels):
                        logger.debug(
                            "Candidate at %s (%d black pixels)", tuple(seed), len(region.pixels)
                        )
                        candidates.append(seed)
                        row += self.row_skip
                col += self.step
            row += self.step

        return candidates

    def scan(self, grid: BinaryGrid) -> ScanResult:
        """Run the sweep and deduplication over a prepared grid."""
        candidates = self.find_candidates(grid)
        redundant = mark_redundant(candidates, self.similarity_threshold)
        result = ScanResult(
            shape=(grid.rows, grid.columns), candidates=candidates, redundant=redundant
        )
        logger.info(
            "Scanned %dx%d grid: %d candidates, %d intersections",
            grid.rows,
            grid.columns,
            len(candidates),
            result.count,
        )
        return result

    def scan_image(self, gray: np.ndarray) -> ScanResult:
        """Scan a decoded grayscale buffer."""
        return self.scan(BinaryGrid(gray))

    def count(self, gray: np.ndarray) -> int:
        """Count intersections in a decoded grayscale buffer."""
        return self.scan_image(gray).count

    def process_image(
        self,
        image_path: Path | str,
        annotate_path: Optional[Path | str] = None,
    ) -> ScanResult:
        """
        Load an image file, scan it and optionally save an annotated copy.

        Args:
            image_path: Path to the drawing
            annotate_path: Optional output path for the annotated PNG

        Returns:
            ScanResult for the image

        Raises:
            FileNotFoundError: If the image doesn't exist
            ValueError: If the image can't be decoded or is empty

        Example:
            >>> result = scanner.process_image("network.png", "network_annot.png")
            >>> print(f"Intersections: {result.count}")
        """
        image_path = Path(image_path)
        gray = load_grayscale(image_path)
        result = self.scan_image(gray)
        result.image_path = image_path

        if annotate_path is not None:
            annotate_path = Path(annotate_path)
            annotate_path.parent.mkdir(parents=True, exist_ok=True)
            redundant = [p for p, bad in zip(result.candidates, result.redundant) if bad]
            vis = draw_markers(gray, result.intersections, redundant)
            cv2.imwrite(str(annotate_path), vis)
            result.annotated_path = annotate_path

        return result

    def batch_process(
        self,
        image_paths: Sequence[Path | str],
        output_csv: Optional[Path | str] = None,
    ) -> List[ScanResult]:
        """
        Scan several images in turn.

        Args:
            image_paths: Drawings to process
            output_csv: Optional CSV that receives one row per image

        Returns:
            List of ScanResult objects, in input order

        Example:
            >>> results = scanner.batch_process(["a.png", "b.png"], "counts.csv")
        """
        results = [self.process_image(p) for p in image_paths]
        if output_csv is not None:
            append_results_csv(
                Path(output_csv),
                [(str(r.image_path), r.count, len(r.candidates)) for r in results],
            )
        return results


def count_intersections(gray: np.ndarray) -> int:
    """Count intersections with the default scanner settings."""
    return IntersectionScanner().count(gray)
