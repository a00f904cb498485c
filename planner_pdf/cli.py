#!/usr/bin/env python3
"""
Generate a hyperlinked calendar planner PDF for the reMarkable tablet.

Pages:
- One main page linking every year
- Year pages with a 3x4 grid of month thumbnails
- Month pages with a weekday-aligned grid of days
- Day pages with notes and a dotted tasks area
- "<" / ">" arrows on every page linking to the previous / next period
"""

import argparse
import logging
import sys
from typing import List, Optional

from .builder import PlannerBuilder
from .config import (DEFAULT_FILENAME, DEFAULT_NUM_YEARS, DEFAULT_START_YEAR,
                     SUNDAY, PlannerConfig)
from .errors import PlannerError

logger = logging.getLogger("planner_pdf")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="planner-pdf",
        description="Generate a hyperlinked Year/Month/Day planner PDF.")
    parser.add_argument("start_year", nargs="?", type=int, default=DEFAULT_START_YEAR,
                        help=f"first year of the planner (default: {DEFAULT_START_YEAR})")
    parser.add_argument("num_years", nargs="?", type=int, default=DEFAULT_NUM_YEARS,
                        help=f"number of years (default: {DEFAULT_NUM_YEARS})")
    parser.add_argument("filename", nargs="?", default=DEFAULT_FILENAME,
                        help=f"output PDF path (default: {DEFAULT_FILENAME})")
    parser.add_argument("--first-day-of-week", type=int, default=SUNDAY, choices=range(7),
                        metavar="{0..6}",
                        help="first column of month grids, 0 = Sunday (default: 0)")
    parser.add_argument("--left-handed", action="store_true",
                        help="put the notes section and margin on the right")
    parser.add_argument("--portrait", action="store_true",
                        help="portrait pages instead of landscape")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log every layout step")
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> PlannerConfig:
    return PlannerConfig(start_year=args.start_year,
                         num_years=args.num_years,
                         filename=args.filename,
                         first_day_of_week=args.first_day_of_week,
                         left_handed=args.left_handed,
                         portrait=args.portrait).validated()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(message)s")
    config = config_from_args(args)

    builder = PlannerBuilder(config)
    try:
        document = builder.generate()
        page_count = len(document)
        builder.save(config.filename)
    except PlannerError as exc:
        logger.error("Planner generation failed: %s", exc)
        return 1

    print("\n" + "=" * 50)
    print("GENERATION COMPLETE")
    print("=" * 50)
    print(f"Output: {config.filename}")
    print(f"Pages: {page_count}")
    print(f"Size: {config.page_width} x {config.page_height} px")
    if builder.overflows:
        print(f"Skipped grids: {len(builder.overflows)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
