"""
Example 1: Basic Usage
======================

This example demonstrates the simplest way to use the Intersection Counter.
We count the junctions of a single drawing with default parameters.

For Map Readers:
----------------
Imagine you scanned a hand-drawn map of footpaths. This script shows how to:
1. Load the scan
2. Count the places where paths cross or branch
3. Save a picture showing where each crossing was found

The drawing must be binary: background pixels at intensity 0, strokes at
any other intensity. Run demo/generate_demo_data.py to get a sample.
"""

from pathlib import Path
from intersection_counter import IntersectionScanner


def main():
    # Configuration
    # ---------------
    image_path = Path("../demo/demo_network.png")
    output_dir = Path("./output_example_01")
    output_dir.mkdir(exist_ok=True, parents=True)

    print("=" * 60)
    print("Example 1: Basic Intersection Counting")
    print("=" * 60)
    print()
    print(f"Input:  {image_path}")
    print(f"Output: {output_dir}")
    print()

    # Default settings: stride 5, flood fill bounds 200/400,
    # closeness threshold 5, row skip 20
    scanner = IntersectionScanner()

    print("Scanning drawing...")
    result = scanner.process_image(
        image_path,
        annotate_path=output_dir / "network_annot.png",
    )

    print()
    print("Results:")
    print("-" * 60)
    print(f"Image size:     {result.shape[0]} x {result.shape[1]}")
    print(f"Candidates:     {len(result.candidates)}")
    print(f"Intersections:  {result.count}")
    print()
    for p in result.intersections:
        print(f"  row {p.row:4d}, col {p.col:4d}")

    print()
    print(f"Annotated image: {result.annotated_path}")
    print("  * Yellow dots: kept intersections")
    print("  * Red rings: candidates merged into an earlier one")


if __name__ == "__main__":
    main()
