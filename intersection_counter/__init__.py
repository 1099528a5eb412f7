"""
Intersection Counter
====================

Count the junctions of a scanned path network or any binary line drawing.

An intersection is a point where more than two strokes meet. Straight passes
and simple curves are not counted.

Key Features:
- Exact binary discretization of grayscale scans (PNG, JPEG, GeoTIFF)
- Bounded breadth-first region growth around sampled seed points
- Extreme-pixel shape heuristic separating crossings from single strokes
- Deduplication of nearby detections
- JSON/CSV results and annotated image outputs

Example:
    >>> from intersection_counter import IntersectionScanner
    >>> scanner = IntersectionScanner()
    >>> result = scanner.process_image("network.png", annotate_path="network_annot.png")
    >>> print(result.count)

Command line:
    $ intersection-counter network.png
    3
"""

__version__ = "1.0.0"

from .scripts.grid import BinaryGrid
from .scripts.region import Region, RegionGrower
from .scripts.shape import Extremes, ShapeClassifier, find_extremes, is_intersection
from .scripts.scanner import (
    IntersectionScanner,
    ScanResult,
    count_intersections,
    deduplicate,
    mark_redundant,
)
from .scripts.utils import (
    Pixel,
    are_similar,
    load_grayscale,
    draw_stroke,
    draw_cross,
    draw_markers,
)

__all__ = [
    "BinaryGrid",
    "Region",
    "RegionGrower",
    "Extremes",
    "ShapeClassifier",
    "find_extremes",
    "is_intersection",
    "IntersectionScanner",
    "ScanResult",
    "count_intersections",
    "deduplicate",
    "mark_redundant",
    "Pixel",
    "are_similar",
    "load_grayscale",
    "draw_stroke",
    "draw_cross",
    "draw_markers",
]
