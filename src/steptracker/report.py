"""
Human-readable activity reports.

Turns parsed records into the text summaries shown to the user: a training
report for ``"<steps>,<activity>,<duration>"`` records and a daily step report
for ``"<steps>,<duration>"`` records. Errors are logged and re-raised to the
caller; no partial report is ever returned.
"""

import logging
from typing import Iterable, List, Tuple

import pandas as pd

from steptracker.exceptions import StepTrackerError
from steptracker.metrics import (
    Activity,
    BodyProfile,
    compute_metrics,
    resolve_activity,
)
from steptracker.parser import (
    ActivityRecord,
    parse_day_record,
    parse_record,
    parse_training_record,
)

__all__ = [
    "summarize",
    "training_info",
    "day_action_info",
    "summarize_records",
    "SUMMARY_COLUMNS",
]

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    "record",
    "activity",
    "steps",
    "duration_h",
    "distance_km",
    "speed_kmh",
    "calories",
]

_TRAINING_TEMPLATE = (
    "Activity: {activity}\n"
    "Duration: {hours:.2f} h.\n"
    "Distance: {distance:.2f} km.\n"
    "Speed: {speed:.2f} km/h\n"
    "Calories burned: {calories:.2f}\n"
)

_DAY_TEMPLATE = (
    "Steps: {steps}.\n"
    "Distance: {distance:.2f} km.\n"
    "Calories burned: {calories:.2f} kcal.\n"
)


def _activity_for(record: ActivityRecord) -> Activity:
    # Daily records carry no label and are counted as a walk
    if record.activity is None:
        return Activity.WALKING
    return resolve_activity(record.activity)


def summarize(record: ActivityRecord, profile: BodyProfile) -> str:
    """Build the text report for a parsed record.

    Training records (with an activity label) get the full report with
    duration and speed; daily records get the step-only report computed
    with the walking formula.

    Args:
        record: Parsed activity record
        profile: Body weight and height

    Returns:
        Multi-line report with numbers rounded to 2 decimals

    Raises:
        UnknownActivityError: If the activity label is not supported.
        ValidationError: If any input is not strictly positive.
    """
    try:
        metrics = compute_metrics(record, profile, _activity_for(record))
    except StepTrackerError as e:
        logger.warning("Cannot summarize %s: %s", record, e)
        raise

    if record.activity is None:
        return _DAY_TEMPLATE.format(
            steps=record.steps, distance=metrics.distance_km, calories=metrics.calories
        )
    return _TRAINING_TEMPLATE.format(
        activity=record.activity,
        hours=record.duration_hours,
        distance=metrics.distance_km,
        speed=metrics.mean_speed_kmh,
        calories=metrics.calories,
    )


def _parse_logged(parse, raw: str) -> ActivityRecord:
    try:
        return parse(raw)
    except StepTrackerError as e:
        logger.warning("Cannot parse record %r: %s", raw, e)
        raise


def training_info(raw: str, weight: float, height: float) -> str:
    """Report for a ``"<steps>,<activity>,<duration>"`` training record."""
    record = _parse_logged(parse_training_record, raw)
    return summarize(record, BodyProfile(weight_kg=weight, height_m=height))


def day_action_info(raw: str, weight: float, height: float) -> str:
    """Report for a ``"<steps>,<duration>"`` daily step record."""
    record = _parse_logged(parse_day_record, raw)
    return summarize(record, BodyProfile(weight_kg=weight, height_m=height))


def summarize_records(
    raws: Iterable[str], profile: BodyProfile
) -> Tuple[pd.DataFrame, List[Tuple[str, StepTrackerError]]]:
    """Compute metrics for many records at once.

    Records of either layout may be mixed. Records that fail are left out
    of the table and returned separately together with their error.

    Args:
        raws: Record strings
        profile: Body weight and height applied to every record

    Returns:
        A tuple (table, errors). The table has one row per valid record and
        the columns in SUMMARY_COLUMNS; errors is a list of (record, error).
    """
    rows = []
    errors = []

    for raw in raws:
        try:
            record = parse_record(raw)
            activity = _activity_for(record)
            metrics = compute_metrics(record, profile, activity)
        except StepTrackerError as e:
            logger.warning("Skipping record %r: %s", raw, e)
            errors.append((raw, e))
            continue

        rows.append(
            {
                "record": raw,
                "activity": activity.value,
                "steps": record.steps,
                "duration_h": round(record.duration_hours, 2),
                "distance_km": round(metrics.distance_km, 2),
                "speed_kmh": round(metrics.mean_speed_kmh, 2),
                "calories": round(metrics.calories, 2),
            }
        )

    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS), errors
