"""
Distance, speed and calorie calculations for step records.

This module provides functions to estimate distance from a step count and
body height, the mean speed over an activity, and calories burned using the
running formula or its scaled-down walking variant.
"""

import enum
from dataclasses import dataclass
from datetime import timedelta

import numpy as np

from steptracker.constants import (
    ACTIVITY_MAPPING,
    M_IN_KM,
    MIN_IN_H,
    SEC_IN_H,
    SEC_IN_MIN,
    STRIDE_COEFFICIENT,
    WALKING_CALORIES_COEFFICIENT,
)
from steptracker.exceptions import UnknownActivityError, ValidationError

__all__ = [
    "Activity",
    "BodyProfile",
    "ComputedMetrics",
    "distance",
    "mean_speed",
    "running_calories",
    "walking_calories",
    "resolve_activity",
    "calories_for",
    "compute_metrics",
]


class Activity(enum.Enum):
    """Supported activity kinds."""

    RUNNING = "running"
    WALKING = "walking"


@dataclass(frozen=True)
class BodyProfile:
    """Body measurements of the person doing the activity."""

    weight_kg: float
    height_m: float

    def __post_init__(self):
        _check_positive("weight", self.weight_kg)
        _check_positive("height", self.height_m)


@dataclass(frozen=True)
class ComputedMetrics:
    """Metrics derived from one activity record."""

    distance_km: float
    mean_speed_kmh: float
    calories: float


def _check_positive(field: str, value) -> None:
    if not np.isfinite(value):
        raise ValidationError(field, value, "must be a finite number")
    if value <= 0:
        raise ValidationError(field, value)


def _validate_inputs(steps: int, weight: float, height: float, duration: timedelta) -> None:
    if steps <= 0:
        raise ValidationError("steps", steps)
    _check_positive("weight", weight)
    _check_positive("height", height)
    if duration <= timedelta(0):
        raise ValidationError("duration", duration)


def distance(steps: int, height: float) -> float:
    """Estimate distance covered in kilometres.

    Step length is taken as ``height * STRIDE_COEFFICIENT``.

    Args:
        steps: Number of steps
        height: Body height in metres

    Returns:
        Distance in kilometres
    """
    step_length = height * STRIDE_COEFFICIENT
    return steps * step_length / M_IN_KM


def mean_speed(steps: int, height: float, duration: timedelta) -> float:
    """Calculate mean speed in km/h, or 0.0 for a non-positive duration."""
    if duration <= timedelta(0):
        return 0.0
    hours = duration.total_seconds() / SEC_IN_H
    return distance(steps, height) / hours


def running_calories(steps: int, weight: float, height: float, duration: timedelta) -> float:
    """Calculate calories burned while running.

    Uses ``weight * mean_speed * minutes / 60``.

    Args:
        steps: Number of steps
        weight: Body weight in kilograms
        height: Body height in metres
        duration: Activity duration

    Returns:
        Calories burned in kcal

    Raises:
        ValidationError: For the first input that is not strictly positive,
            checked in the order steps, weight, height, duration.

    Example:
        >>> round(running_calories(1000, 75.0, 1.75, timedelta(minutes=30)), 2)
        59.06
    """
    _validate_inputs(steps, weight, height, duration)
    speed = mean_speed(steps, height, duration)
    minutes = duration.total_seconds() / SEC_IN_MIN
    return (weight * speed * minutes) / MIN_IN_H


def walking_calories(steps: int, weight: float, height: float, duration: timedelta) -> float:
    """Calculate calories burned while walking.

    The running formula scaled by ``WALKING_CALORIES_COEFFICIENT``. Inputs are
    validated the same way as in :func:`running_calories`.
    """
    return running_calories(steps, weight, height, duration) * WALKING_CALORIES_COEFFICIENT


def resolve_activity(label: str) -> Activity:
    """Map an activity label to an Activity, ignoring case.

    Both English and Russian spellings are accepted ("running"/"бег",
    "walking"/"ходьба").

    Raises:
        UnknownActivityError: If the label is not recognised.
    """
    name = ACTIVITY_MAPPING.get(label.strip().lower())
    if name is None:
        raise UnknownActivityError(label)
    return Activity(name)


_CALORIE_FORMULAS = {
    Activity.RUNNING: running_calories,
    Activity.WALKING: walking_calories,
}


def calories_for(
    activity: Activity, steps: int, weight: float, height: float, duration: timedelta
) -> float:
    """Calculate calories with the formula for the given activity."""
    return _CALORIE_FORMULAS[activity](steps, weight, height, duration)


def compute_metrics(record, profile: BodyProfile, activity: Activity) -> ComputedMetrics:
    """Compute distance, mean speed and calories for a parsed record.

    Args:
        record: ActivityRecord from the parser
        profile: Body profile of the person
        activity: Activity used to pick the calorie formula

    Returns:
        ComputedMetrics for the record
    """
    calories = calories_for(
        activity, record.steps, profile.weight_kg, profile.height_m, record.duration
    )
    return ComputedMetrics(
        distance_km=distance(record.steps, profile.height_m),
        mean_speed_kmh=mean_speed(record.steps, profile.height_m, record.duration),
        calories=calories,
    )
