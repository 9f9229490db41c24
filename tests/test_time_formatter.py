"""Tests for schedule date and time formatting."""

from datetime import datetime

import pytest

from bart_commute.domain.time_formatter import (
    format_clock_time,
    format_date,
    format_time,
    parse_schedule_datetime,
)


def test_format_date_uses_month_day_year() -> None:
    """Given an instant, when formatting the date, then returns MM/DD/YYYY."""
    assert format_date(datetime(2023, 1, 26, 9, 0)) == "01/26/2023"


def test_format_date_round_trips_components() -> None:
    """Given an instant, when parsing the formatted date back, then month/day/year match."""
    instant = datetime(2026, 12, 3, 23, 59)

    month, day, year = (int(part) for part in format_date(instant).split("/"))

    assert (month, day, year) == (12, 3, 2026)


@pytest.mark.parametrize(
    ("instant", "expected"),
    [
        (datetime(2023, 1, 26, 8, 35), "08:35+AM"),
        (datetime(2023, 1, 26, 0, 5), "12:05+AM"),
        (datetime(2023, 1, 26, 12, 0), "12:00+PM"),
        (datetime(2023, 1, 26, 17, 25), "05:25+PM"),
    ],
)
def test_format_time_uses_plus_separator(instant: datetime, expected: str) -> None:
    """Given an instant, when formatting the time, then returns hh:mm+AM/PM."""
    result = format_time(instant)

    assert result == expected
    assert result.count("+") == 1
    assert " " not in result


def test_format_clock_time_keeps_space_for_display() -> None:
    """Given an instant, when formatting for display, then separates with a space."""
    assert format_clock_time(datetime(2023, 1, 26, 18, 7)) == "06:07 PM"


def test_parse_schedule_datetime_tolerates_whitespace() -> None:
    """Given BART labels with trailing spaces, when parsing, then returns the instant."""
    result = parse_schedule_datetime("01/26/2023 ", " 8:10 AM")

    assert result == datetime(2023, 1, 26, 8, 10)


def test_parse_schedule_datetime_handles_pm() -> None:
    """Given a PM label, when parsing, then returns the 24-hour instant."""
    assert parse_schedule_datetime("01/26/2023", "6:00 PM") == datetime(2023, 1, 26, 18, 0)


def test_parse_schedule_datetime_rejects_malformed_labels() -> None:
    """Given a malformed label, when parsing, then raises ValueError."""
    with pytest.raises(ValueError):
        parse_schedule_datetime("2023-01-26", "8:10 AM")
