#!/usr/bin/env .venv/bin/python3
"""
Command-line script to summarize step records.

Usage:
    ./track.py "6000,running,45m" --weight 70 --height 1.80
    ./track.py - --table < records.txt
"""

import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

from steptracker.cli import main

if __name__ == "__main__":
    sys.exit(main())
