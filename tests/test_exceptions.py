"""Tests for custom exceptions."""

import pytest

from steptracker.exceptions import (
    ConfigurationError,
    FormatError,
    ParseError,
    StepTrackerError,
    UnknownActivityError,
    ValidationError,
)


def test_base_exception():
    """Test StepTrackerError can be raised and caught."""
    with pytest.raises(StepTrackerError):
        raise StepTrackerError("Base error")


def test_format_error():
    """Test FormatError keeps the record and field counts."""
    with pytest.raises(StepTrackerError) as exc_info:
        raise FormatError("1000", 1, (2, 3))

    err = exc_info.value
    assert isinstance(err, FormatError)
    assert err.raw == "1000"
    assert err.field_count == 1
    assert err.expected == (2, 3)
    assert "2 or 3" in str(err)


def test_parse_error():
    """Test ParseError keeps field name and value."""
    err = ParseError("steps", "abc")
    assert err.field == "steps"
    assert err.value == "abc"
    assert "steps" in str(err)
    assert "'abc'" in str(err)


def test_validation_error_default_constraint():
    """Test ValidationError message uses the positivity constraint by default."""
    err = ValidationError("weight", -1.0)
    assert err.field == "weight"
    assert err.value == -1.0
    assert err.constraint == "must be positive"
    assert str(err) == "weight must be positive, got -1.0"


def test_unknown_activity_error():
    """Test UnknownActivityError keeps the label."""
    with pytest.raises(StepTrackerError):
        raise UnknownActivityError("dancing")

    assert UnknownActivityError("dancing").label == "dancing"


def test_configuration_error():
    """Test ConfigurationError can be raised and caught."""
    with pytest.raises(ConfigurationError):
        raise ConfigurationError("Invalid config")

    # Should also be caught by base exception
    with pytest.raises(StepTrackerError):
        raise ConfigurationError("Invalid config")
