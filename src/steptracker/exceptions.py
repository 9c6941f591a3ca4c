"""
Custom exceptions for steptracker.

Defines specific exception types for better error handling and debugging.
Every exception keeps the offending values as attributes so callers can
react to the failure without parsing the message.
"""

from typing import Any, Sequence


class StepTrackerError(Exception):
    """Base exception for all steptracker errors."""


class FormatError(StepTrackerError):
    """Exception raised when a record has the wrong number of fields."""

    def __init__(self, raw: str, field_count: int, expected: Sequence[int]):
        self.raw = raw
        self.field_count = field_count
        self.expected = tuple(expected)
        layouts = " or ".join(str(n) for n in self.expected)
        super().__init__(
            f"invalid record format {raw!r}: expected {layouts} comma-separated fields, "
            f"got {field_count}"
        )


class ParseError(StepTrackerError):
    """Exception raised when a field cannot be converted to its type."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"cannot parse {field} from {value!r}")


class ValidationError(StepTrackerError):
    """Exception raised for data validation errors."""

    def __init__(self, field: str, value: Any, constraint: str = "must be positive"):
        self.field = field
        self.value = value
        self.constraint = constraint
        super().__init__(f"{field} {constraint}, got {value!r}")


class UnknownActivityError(StepTrackerError):
    """Exception raised when an activity label is not supported."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"unknown activity type {label!r}")


class ConfigurationError(StepTrackerError):
    """Exception raised for configuration errors."""
