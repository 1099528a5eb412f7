"""
Utility functions for Intersection Counter.

These functions handle low-level raster operations: decoding images into
grayscale buffers, pixel geometry helpers, stroke drawing and writing
annotated outputs.
"""

import csv
from pathlib import Path
from typing import List, NamedTuple, Sequence, Tuple

import numpy as np
import cv2
import rasterio
from skimage.draw import line


# Detection constants
DEFAULT_STEP = 5
DEFAULT_MIN_ITERATIONS = 200
DEFAULT_MAX_ITERATIONS = 400
DEFAULT_SIMILARITY_THRESHOLD = 5
DEFAULT_ROW_SKIP = 20

# Intensity that marks a "white" pixel. The darkest value is treated as white.
WHITE_INTENSITY = 0
STROKE_INTENSITY = 255

# Drawing colors (BGR for OpenCV)
REDUNDANT_COLOR = (0, 0, 255)  # red
INTERSECTION_COLOR = (0, 255, 255)  # yellow

GEOTIFF_SUFFIXES = (".tif", ".tiff")


class Pixel(NamedTuple):
    """A raster position as (row, column)."""

    row: int
    col: int


def are_similar(a: Pixel, b: Pixel, threshold: int = DEFAULT_SIMILARITY_THRESHOLD) -> bool:
    """
    Check whether two pixels are close to each other.

    Both coordinate-wise absolute differences must be strictly below
    the threshold.

    Args:
        a: First pixel
        b: Second pixel
        threshold: Closeness threshold in pixels

    Returns:
        True if the pixels are near each other

    Example:
        >>> are_similar(Pixel(0, 0), Pixel(4, 4))
        True
        >>> are_similar(Pixel(0, 0), Pixel(5, 0))
        False
    """
    return abs(a[0] - b[0]) < threshold and abs(a[1] - b[1]) < threshold


def load_grayscale(image_path: Path | str) -> np.ndarray:
    """
    Decode an image file into a single-channel intensity buffer.

    GeoTIFF scans are read with rasterio (band 1), everything else goes
    through OpenCV in grayscale mode.

    Args:
        image_path: Path to the image file

    Returns:
        2D intensity array (rows, columns)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file can't be decoded as an image

    Example:
        >>> gray = load_grayscale("network.png")
        >>> gray.shape
        (480, 640)
    """
    image_path = Path(image_path)
    if not image_path.exists():
        raise FileNotFoundError(f"Image not found: {image_path}")

    if image_path.suffix.lower() in GEOTIFF_SUFFIXES:
        with rasterio.open(str(image_path)) as ds:
            return ds.read(1)

    gray = cv2.imread(str(image_path), cv2.IMREAD_GRAYSCALE)
    if gray is None:
        raise ValueError(f"Could not decode image: {image_path}")
    return gray


def draw_stroke(
    canvas: np.ndarray,
    start: Tuple[int, int],
    end: Tuple[int, int],
    intensity: int = STROKE_INTENSITY,
) -> None:
    """
    Draw a one-pixel-wide straight stroke on a grayscale canvas (in-place).

    Args:
        canvas: 2D intensity array to draw on
        start: Start point (row, column)
        end: End point (row, column)
        intensity: Stroke intensity
    """
    rr, cc = line(int(start[0]), int(start[1]), int(end[0]), int(end[1]))
    h, w = canvas.shape[:2]
    keep = (rr >= 0) & (rr < h) & (cc >= 0) & (cc < w)
    canvas[rr[keep], cc[keep]] = intensity


def draw_cross(
    canvas: np.ndarray,
    center: Tuple[int, int],
    arm: int,
    intensity: int = STROKE_INTENSITY,
) -> None:
    """Draw a "+" shaped crossing of two perpendicular strokes (in-place)."""
    r, c = center
    draw_stroke(canvas, (r - arm, c), (r + arm, c), intensity)
    draw_stroke(canvas, (r, c - arm), (r, c + arm), intensity)


def draw_markers(
    gray: np.ndarray,
    intersections: Sequence[Pixel],
    redundant: Sequence[Pixel] = (),
    radius: int = 4,
) -> np.ndarray:
    """
    Mark detected intersections on a color copy of a grayscale image.

    Args:
        gray: Grayscale image (H, W)
        intersections: Kept intersection pixels
        redundant: Candidates removed by deduplication
        radius: Marker radius in pixels

    Returns:
        Annotated BGR image (H, W, 3) as uint8
    """
    vis = cv2.cvtColor(np.ascontiguousarray(gray, dtype=np.uint8), cv2.COLOR_GRAY2BGR)
    for p in redundant:
        cv2.circle(vis, (int(p.col), int(p.row)), radius, REDUNDANT_COLOR, 1)
    for p in intersections:
        cv2.circle(vis, (int(p.col), int(p.row)), radius, INTERSECTION_COLOR, -1)
    return vis


def ensure_results_csv(results_csv: Path) -> Path:
    """
    Ensure the batch results CSV exists with its header row.

    Args:
        results_csv: Path to the CSV file

    Returns:
        The same path, for chaining
    """
    results_csv.parent.mkdir(parents=True, exist_ok=True)
    if not results_csv.exists():
        with open(results_csv, "w", newline="") as f:
            w = csv.writer(f)
            w.writerow(["image", "intersections", "candidates"])
    return results_csv


def append_results_csv(results_csv: Path, rows: List[Tuple[str, int, int]]) -> None:
    """Append (image, intersections, candidates) rows to the results CSV."""
    ensure_results_csv(results_csv)
    with open(results_csv, "a", newline="") as f:
        w = csv.writer(f)
        for row in rows:
            w.writerow(list(row))
