#!/usr/bin/env python3
"""
Demo Data Generator
===================

Generate synthetic line drawings with a known number of intersections.

This script creates:
1. A PNG drawing of a small path network (crosses plus plain strokes)
2. The same drawing as a single-band GeoTIFF
3. Output that can be processed by the Intersection Counter

Run this to generate demo data before running examples.
"""

from pathlib import Path
from typing import List, Tuple

import numpy as np
import cv2
import rasterio
from rasterio.transform import from_origin

from intersection_counter.scripts.utils import draw_cross, draw_stroke


def generate_synthetic_network(
    output_path: Path,
    width: int = 400,
    height: int = 400,
    n_crosses: int = 3,
    arm_px: int = 20,
    spacing_px: int = 100,
    n_strokes: int = 2,
) -> List[Tuple[int, int]]:
    """
    Generate a synthetic drawing with crosses on a diagonal and plain strokes.

    Crosses are laid out on a diagonal so that every one of them lands in
    its own sweep band. Plain strokes run along the bottom of the image.

    Args:
        output_path: Where to save the PNG
        width: Image width in pixels
        height: Image height in pixels
        n_crosses: Number of "+" crossings to draw
        arm_px: Half length of each cross arm
        spacing_px: Diagonal distance between cross centers
        n_strokes: Number of straight horizontal strokes

    Returns:
        Cross centers (row, column)
    """
    print(f"Generating synthetic network: {width}x{height} pixels")
    print(f"  Crosses: {n_crosses}, Strokes: {n_strokes}")

    # Background is white (intensity 0), strokes are black
    image = np.zeros((height, width), dtype=np.uint8)

    centers = []
    for k in range(n_crosses):
        center = (52 + k * spacing_px, 52 + k * spacing_px)
        draw_cross(image, center, arm_px)
        centers.append(center)

    for k in range(n_strokes):
        row = height - 30 - k * 30
        draw_stroke(image, (row, 10), (row, width // 3))

    output_path.parent.mkdir(parents=True, exist_ok=True)
    cv2.imwrite(str(output_path), image)
    print(f"  Saved: {output_path}")
    return centers


def write_geotiff(png_path: Path, tif_path: Path, pixel_size_m: float = 1.0) -> None:
    """Copy a PNG drawing into a single-band GeoTIFF."""
    image = cv2.imread(str(png_path), cv2.IMREAD_GRAYSCALE)
    transform = from_origin(0, 0, pixel_size_m, pixel_size_m)

    with rasterio.open(
        tif_path,
        "w",
        driver="GTiff",
        height=image.shape[0],
        width=image.shape[1],
        count=1,
        dtype=image.dtype,
        transform=transform,
    ) as dst:
        dst.write(image, 1)

    print(f"  GeoTIFF: {tif_path}")


def main():
    """Generate demo data."""
    print("=" * 60)
    print("Intersection Counter - Demo Data Generator")
    print("=" * 60)
    print()

    demo_dir = Path(__file__).parent
    png_path = demo_dir / "demo_network.png"
    centers = generate_synthetic_network(png_path)
    write_geotiff(png_path, png_path.with_suffix(".tif"))

    print()
    print(f"Expected intersections: {len(centers)}")
    for r, c in centers:
        print(f"  - ({r}, {c})")
    print()
    print("Next steps:")
    print("  1. intersection-counter demo_network.png")
    print("  2. Run the examples with the demo data")
    print()


if __name__ == "__main__":
    main()
