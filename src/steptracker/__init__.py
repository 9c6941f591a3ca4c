"""
Step Tracker - distance, speed and calorie estimates from step records.

This package provides tools for:
- Parsing compact "steps,duration" and "steps,activity,duration" records
- Estimating distance and mean speed from step count and body height
- Calculating calories burned while walking or running
"""

from .exceptions import (
    FormatError,
    ParseError,
    StepTrackerError,
    UnknownActivityError,
    ValidationError,
)
from .metrics import (
    Activity,
    BodyProfile,
    ComputedMetrics,
    distance,
    mean_speed,
    running_calories,
    walking_calories,
)
from .parser import ActivityRecord, parse_duration, parse_record
from .report import day_action_info, summarize, summarize_records, training_info

__version__ = "0.1.0"
__author__ = "Step Tracker Contributors"

__all__ = [
    "ActivityRecord",
    "Activity",
    "BodyProfile",
    "ComputedMetrics",
    "parse_record",
    "parse_duration",
    "distance",
    "mean_speed",
    "running_calories",
    "walking_calories",
    "summarize",
    "training_info",
    "day_action_info",
    "summarize_records",
    "StepTrackerError",
    "FormatError",
    "ParseError",
    "ValidationError",
    "UnknownActivityError",
]
