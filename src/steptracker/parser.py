"""
Activity record parser.

This module decodes the compact comma-separated records produced by step
counters into typed values. Two layouts are supported:

- ``"<steps>,<duration>"`` for a daily step summary
- ``"<steps>,<activity>,<duration>"`` for a training session

Durations use unit suffixes such as ``"1h"``, ``"30m0s"`` or ``"1.5h"``.
"""

import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Sequence

import numpy as np

from steptracker.constants import (
    DAY_LAYOUT,
    DURATION_UNITS,
    MAX_STEPS,
    RECORD_LAYOUTS,
    SEC_IN_H,
    SEC_IN_MIN,
    TRAINING_LAYOUT,
)
from steptracker.exceptions import FormatError, ParseError, ValidationError

__all__ = [
    "ActivityRecord",
    "parse_duration",
    "parse_steps",
    "parse_record",
    "parse_day_record",
    "parse_training_record",
]

_UNIT_PATTERN = "|".join(sorted(DURATION_UNITS, key=len, reverse=True))
_DURATION_TOKEN = re.compile(rf"(\d+\.?\d*|\.\d+)({_UNIT_PATTERN})", re.ASCII)
_DURATION_FULL = re.compile(rf"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:{_UNIT_PATTERN}))+", re.ASCII)
_STEPS = re.compile(r"[+-]?\d+", re.ASCII)


@dataclass(frozen=True)
class ActivityRecord:
    """Parsed activity record.

    ``activity`` is the raw label from a training record, or None for a
    daily step summary.
    """

    steps: int
    activity: Optional[str]
    duration: timedelta

    @property
    def duration_hours(self) -> float:
        return self.duration.total_seconds() / SEC_IN_H

    @property
    def duration_minutes(self) -> float:
        return self.duration.total_seconds() / SEC_IN_MIN


def parse_duration(text: str) -> timedelta:
    """Parse a duration expression into a timedelta.

    A duration is an optionally signed sequence of decimal numbers, each
    followed by a unit suffix: ``ns``, ``us`` (or ``µs``), ``ms``, ``s``,
    ``m`` or ``h``. The bare string ``"0"`` means zero.

    Args:
        text: Duration expression, e.g. ``"1h30m"`` or ``"45.5s"``.

    Returns:
        The duration as a timedelta. Precision below one microsecond is lost.
        Negative durations are returned as-is; positivity is the caller's check.

    Raises:
        ParseError: If the text is not a valid duration expression or is too
            large for a timedelta.

    Example:
        >>> parse_duration("30m0s")
        datetime.timedelta(seconds=1800)
    """
    sign_char = text[:1] if text[:1] in ("+", "-") else ""
    body = text[len(sign_char):]
    sign = -1.0 if sign_char == "-" else 1.0
    if body == "0":
        return timedelta(0)
    if not _DURATION_FULL.fullmatch(text):
        raise ParseError("duration", text)

    seconds = sum(
        float(number) * DURATION_UNITS[unit] for number, unit in _DURATION_TOKEN.findall(body)
    )
    if not np.isfinite(seconds):
        raise ParseError("duration", text)
    try:
        return timedelta(seconds=sign * seconds)
    except OverflowError as e:
        raise ParseError("duration", text) from e


def parse_steps(text: str) -> int:
    """Parse a step count (an optionally signed 64-bit decimal integer)."""
    if not _STEPS.fullmatch(text):
        raise ParseError("steps", text)
    try:
        steps = int(text)
    except ValueError as e:
        # Longer than the interpreter allows for int conversion
        raise ParseError("steps", text) from e
    if not -MAX_STEPS - 1 <= steps <= MAX_STEPS:
        raise ParseError("steps", text)
    return steps


def parse_record(raw: str, layouts: Sequence[int] = RECORD_LAYOUTS) -> ActivityRecord:
    """Parse a comma-separated activity record.

    Fields are split on ``,`` and stripped of surrounding whitespace. The
    activity label of a training record is not checked here; unknown labels
    are rejected when metrics are computed.

    Args:
        raw: Record text, e.g. ``"1000,30m0s"`` or ``"6000, running, 1h"``.
        layouts: Accepted field counts. 2 is the daily layout, 3 the training one.

    Returns:
        ActivityRecord with positive steps and duration.

    Raises:
        FormatError: If the field count is not one of ``layouts``.
        ParseError: If steps or duration cannot be parsed.
        ValidationError: If steps or duration is not positive.
    """
    fields = [field.strip() for field in raw.split(",")]
    if len(fields) not in layouts:
        raise FormatError(raw, len(fields), layouts)

    steps = parse_steps(fields[0])
    if steps <= 0:
        raise ValidationError("steps", steps)

    activity = fields[1] if len(fields) == TRAINING_LAYOUT else None

    duration = parse_duration(fields[-1])
    if duration <= timedelta(0):
        raise ValidationError("duration", fields[-1])

    return ActivityRecord(steps=steps, activity=activity, duration=duration)


def parse_day_record(raw: str) -> ActivityRecord:
    """Parse a ``"<steps>,<duration>"`` daily record."""
    return parse_record(raw, layouts=(DAY_LAYOUT,))


def parse_training_record(raw: str) -> ActivityRecord:
    """Parse a ``"<steps>,<activity>,<duration>"`` training record."""
    return parse_record(raw, layouts=(TRAINING_LAYOUT,))
