"""
Command-line interface for steptracker.

Usage:
    steptracker "6000,running,45m" --weight 70 --height 1.80
    steptracker "12000,2h" "5000,walking,50m" --table
    cat records.txt | steptracker - --table
"""

import argparse
import sys

from steptracker.config import load_profile
from steptracker.exceptions import StepTrackerError
from steptracker.logging_config import setup_logging
from steptracker.parser import parse_record
from steptracker.report import summarize, summarize_records

__all__ = ["parse_arguments", "main_with_args", "main"]


def parse_arguments(args=None):
    """Parse command line arguments"""
    ap = argparse.ArgumentParser(
        prog="steptracker", description="Distance, speed and calories from step records"
    )
    ap.add_argument(
        "records",
        nargs="+",
        help="Records as 'steps,duration' or 'steps,activity,duration'; '-' reads stdin",
    )
    ap.add_argument("--weight", type=float, default=None, help="Body weight in kg")
    ap.add_argument("--height", type=float, default=None, help="Body height in m")
    ap.add_argument("--table", action="store_true", help="Print all records as one table")
    ap.add_argument("--log-level", type=str, default=None, help="Logging level, e.g. INFO")
    return ap.parse_args(args)


def _read_records(records, stdin=None):
    """Expand '-' into the non-blank lines of stdin"""
    stdin = sys.stdin if stdin is None else stdin
    for record in records:
        if record == "-":
            yield from (line.strip() for line in stdin if line.strip())
        else:
            yield record


def _print_table(records, profile):
    table, errors = summarize_records(records, profile)
    if not table.empty:
        print(table.to_string(index=False))
    else:
        print("No data to output.")
    for raw, error in errors:
        print(f"❌ {raw}: {error}", file=sys.stderr)
    return 1 if errors else 0


def _print_reports(records, profile):
    status = 0
    for raw in records:
        try:
            print(summarize(parse_record(raw), profile))
        except StepTrackerError as e:
            print(f"❌ {raw}: {e}", file=sys.stderr)
            status = 1
    return status


def main_with_args(args, stdin=None):
    """Main function that takes parsed arguments"""
    setup_logging(args.log_level)

    try:
        profile = load_profile(args.weight, args.height)
    except StepTrackerError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2

    records = list(_read_records(args.records, stdin))
    if args.table:
        return _print_table(records, profile)
    return _print_reports(records, profile)


def main():
    """Main entry point for command line"""
    args = parse_arguments()
    return main_with_args(args)


if __name__ == "__main__":
    sys.exit(main())
