#!/usr/bin/env python3
"""
Example script demonstrating how to use the steptracker library.

This script shows how to:
1. Build a body profile
2. Print reports for single records
3. Summarize a week of records as a table
"""

import sys
from pathlib import Path

# Add src to path if running without installation
src_path = Path(__file__).parent.parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from steptracker import BodyProfile, StepTrackerError, parse_record, summarize, summarize_records

WEEK = [
    "8500,1h25m",
    "6000,running,40m",
    "11200,1h50m",
    "4000,ходьба,45m",
    "7000,бег,50m",
    "not a record",
    "13400,2h10m",
]


def main():
    """Run example step summaries."""
    profile = BodyProfile(weight_kg=72.0, height_m=1.78)

    for raw in WEEK[:2]:
        print(f"Record: {raw}")
        print("=" * 40)
        try:
            print(summarize(parse_record(raw), profile))
        except StepTrackerError as e:
            print(f"❌ {e}")

    table, errors = summarize_records(WEEK, profile)
    print(table.to_string(index=False))
    print(f"\nTotal distance: {table['distance_km'].sum():.2f} km")
    print(f"Total calories: {table['calories'].sum():.2f} kcal")

    for raw, error in errors:
        print(f"Skipped {raw!r}: {error}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
