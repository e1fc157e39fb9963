"""CLI entry point for bracelet time conversion.

Usage:
    armreif-convert 15:30                      # today's date
    armreif-convert 15:30 --date 2025-12-24
    armreif-convert 15:30 --year-chart curve.png
"""

import argparse
import sys
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

from armreif.compute import ReadingError, correction_curve, parse_date, run
from armreif.config import ConfigError, configure_logging, load_config
from armreif.models import QueryInput

EXIT_NO_SOLUTION = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="armreif-convert",
        description="Convert a bracelet sundial reading to true clock time.",
    )
    parser.add_argument("read_time", help="time read off the bracelet, HH:MM")
    parser.add_argument(
        "--date",
        dest="target_date",
        default=None,
        help="target date YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--year-chart",
        type=Path,
        default=None,
        metavar="PATH",
        help="also save the correction curve for the target year as a PNG",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    # .env first so ARMREIF_LOG_LEVEL from it reaches the logging setup
    load_dotenv()
    configure_logging()

    try:
        config = load_config()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    target = args.target_date or date.today().isoformat()
    try:
        result = run(QueryInput(read_time=args.read_time, target_date=target), config)
    except ReadingError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if args.year_chart is not None:
        # Imported lazily: matplotlib is only needed for the chart
        from armreif.renderers.static import save_static_curve

        points = correction_curve(args.read_time, parse_date(target).year, config)
        path = save_static_curve(points, args.read_time, args.year_chart)
        print(f"Saved: {path}")

    if not result:
        print(f"{args.read_time} on {target}: sun never reaches that altitude")
        return EXIT_NO_SOLUTION

    print(f"Bracelet shows: {args.read_time}")
    print(f"True time:      {result.true_time_str}")
    print(f"Correction:     {result.correction_str}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
