"""Tests for text reports and batch summaries."""

import logging

import pytest

from steptracker.exceptions import (
    FormatError,
    ParseError,
    UnknownActivityError,
    ValidationError,
)
from steptracker.metrics import BodyProfile
from steptracker.parser import parse_record
from steptracker.report import (
    SUMMARY_COLUMNS,
    day_action_info,
    summarize,
    summarize_records,
    training_info,
)

WEIGHT = 75.0
HEIGHT = 1.75


@pytest.fixture
def profile():
    return BodyProfile(weight_kg=WEIGHT, height_m=HEIGHT)


class TestSummarize:
    """Tests for summarize()."""

    def test_running_report(self, profile):
        """Test a Russian running label selects the running formula."""
        report = summarize(parse_record("1000,бег,30m0s"), profile)
        lines = report.splitlines()

        assert report.endswith("\n")
        assert len(lines) == 5
        assert lines[0] == "Activity: бег"
        assert lines[1] == "Duration: 0.50 h."
        assert lines[2].startswith("Distance: ") and lines[2].endswith(" km.")
        assert lines[3].startswith("Speed: ") and lines[3].endswith(" km/h")
        assert lines[4] == "Calories burned: 59.06"

    def test_walking_report(self, profile):
        """Test a Russian walking label selects the walking formula."""
        report = summarize(parse_record("1000,ходьба,30m0s"), profile)
        assert report.splitlines()[0] == "Activity: ходьба"
        assert report.splitlines()[4] == "Calories burned: 29.53"

    def test_label_is_echoed_as_given(self, profile):
        report = summarize(parse_record("1000, RUNNING ,1h"), profile)
        assert report.startswith("Activity: RUNNING\n")

    def test_day_report(self, profile):
        """Test the step-only report uses the walking formula."""
        report = summarize(parse_record("1000,30m0s"), profile)
        lines = report.splitlines()

        assert len(lines) == 3
        assert lines[0] == "Steps: 1000."
        assert lines[1].startswith("Distance: ") and lines[1].endswith(" km.")
        assert lines[2] == "Calories burned: 29.53 kcal."

    def test_unknown_activity(self, profile, caplog):
        """Test unknown labels fail and the failure is logged."""
        with caplog.at_level(logging.WARNING, logger="steptracker.report"):
            with pytest.raises(UnknownActivityError):
                summarize(parse_record("1000,dancing,30m0s"), profile)
        assert "dancing" in caplog.text

    def test_idempotent(self, profile):
        record = parse_record("7345,walking,1h12m")
        assert summarize(record, profile) == summarize(record, profile)


class TestEntryPoints:
    """Tests for training_info() and day_action_info()."""

    def test_training_info(self):
        report = training_info("1000,running,30m0s", WEIGHT, HEIGHT)
        assert report.splitlines()[-1] == "Calories burned: 59.06"

    def test_day_action_info(self):
        report = day_action_info("1000,30m0s", WEIGHT, HEIGHT)
        assert report.splitlines()[0] == "Steps: 1000."

    def test_training_info_rejects_day_record(self):
        with pytest.raises(FormatError):
            training_info("1000,30m0s", WEIGHT, HEIGHT)

    def test_day_action_info_rejects_training_record(self):
        with pytest.raises(FormatError):
            day_action_info("1000,walking,30m0s", WEIGHT, HEIGHT)

    @pytest.mark.parametrize(
        "raw, error",
        [
            ("0,1h", ValidationError),
            ("abc,1h", ParseError),
            ("1000", FormatError),
            ("1000,1x", ParseError),
        ],
    )
    def test_day_action_info_errors(self, raw, error):
        with pytest.raises(error):
            day_action_info(raw, WEIGHT, HEIGHT)

    @pytest.mark.parametrize("weight, height", [(0.0, HEIGHT), (WEIGHT, -1.0)])
    def test_invalid_body_profile(self, weight, height):
        with pytest.raises(ValidationError):
            training_info("1000,running,1h", weight, height)

    def test_parse_failure_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="steptracker.report"):
            with pytest.raises(ParseError):
                day_action_info("abc,1h", WEIGHT, HEIGHT)
        assert "abc,1h" in caplog.text


class TestSummarizeRecords:
    """Tests for the batch summary table."""

    def test_mixed_records(self, profile):
        records = ["1000,30m0s", "1000,бег,30m0s", "1000,dancing,30m0s", "abc,1h"]
        table, errors = summarize_records(records, profile)

        assert list(table.columns) == SUMMARY_COLUMNS
        assert len(table) == 2
        assert list(table["activity"]) == ["walking", "running"]
        assert list(table["calories"]) == [29.53, 59.06]
        assert list(table["duration_h"]) == [0.5, 0.5]

        assert [raw for raw, _ in errors] == ["1000,dancing,30m0s", "abc,1h"]
        assert isinstance(errors[0][1], UnknownActivityError)
        assert isinstance(errors[1][1], ParseError)

    def test_oversized_records_are_collected(self, profile):
        records = ["1" + "0" * 400 + ",walking,1h", "1000,99999999999999999h"]
        table, errors = summarize_records(records, profile)

        assert table.empty
        assert [type(error) for _, error in errors] == [ParseError, ParseError]

    def test_empty_input(self, profile):
        table, errors = summarize_records([], profile)
        assert table.empty
        assert list(table.columns) == SUMMARY_COLUMNS
        assert errors == []
