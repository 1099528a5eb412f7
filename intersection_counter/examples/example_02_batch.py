"""
Example 2: Batch Processing
===========================

This example shows how to count intersections in a whole folder of scans
and collect the counts in one CSV file you can open in a spreadsheet.
"""

import json
from pathlib import Path
from intersection_counter import IntersectionScanner


def main():
    input_dir = Path("../demo")
    output_dir = Path("./output_example_02")
    output_dir.mkdir(exist_ok=True, parents=True)

    image_paths = sorted(input_dir.glob("*.png")) + sorted(input_dir.glob("*.tif"))
    if not image_paths:
        print(f"No drawings found in {input_dir}. Run demo/generate_demo_data.py first.")
        return

    print(f"Processing {len(image_paths)} drawings...")
    scanner = IntersectionScanner()
    results = scanner.batch_process(image_paths, output_csv=output_dir / "counts.csv")

    for result in results:
        print(f"  {result.image_path.name:30s} {result.count:3d} intersections")

    summary_path = output_dir / "results.json"
    with open(summary_path, "w") as f:
        json.dump([r.to_dict() for r in results], f, indent=2)

    print()
    print(f"CSV:  {output_dir / 'counts.csv'}")
    print(f"JSON: {summary_path}")


if __name__ == "__main__":
    main()
