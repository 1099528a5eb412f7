"""
Command-line entry point.

Prints the intersection count of one drawing as the sole stdout output.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .scanner import IntersectionScanner

USAGE = "usage: intersection-counter IMAGE [--json] [--annotate PATH] [--verbose]"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="intersection-counter",
        description="Count intersections in a binary line drawing.",
    )
    parser.add_argument("image", help="Path to the drawing (PNG, JPEG, GeoTIFF, ...)")
    parser.add_argument("--json", action="store_true", help="Print full results as JSON")
    parser.add_argument("--annotate", metavar="PATH", help="Save an annotated PNG")
    parser.add_argument("--verbose", action="store_true", help="Log scan progress to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 1:
        print(USAGE, file=sys.stderr)
        print("You need to give the path of an image file.", file=sys.stderr)
        return 1

    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s | %(message)s",
    )

    try:
        result = IntersectionScanner().process_image(args.image, annotate_path=args.annotate)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(result.to_json())
    else:
        print(result.count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
