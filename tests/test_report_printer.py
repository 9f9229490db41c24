"""Tests for the console report."""

import io
from datetime import datetime

import pytest

from bart_commute.adapters.cli.report_printer import ConsoleReportPrinter
from bart_commute.domain.models import (
    BufferedTime,
    CommutePlan,
    StationRole,
    Trip,
    UserSelection,
)


class _Stream(io.StringIO):
    """StringIO reporting a configurable encoding."""

    def __init__(self, encoding: str) -> None:
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:  # type: ignore[override]
        return self._encoding


@pytest.fixture
def plan(sample_trip: Trip) -> CommutePlan:
    return CommutePlan(
        selection=UserSelection(destination=StationRole.WORK, arrival=datetime(2026, 10, 19, 9)),
        trip=sample_trip,
        arrival_buffer=BufferedTime(
            date=datetime(2026, 10, 19, 8, 35),
            message="\t10 min biking from Civic Center\n\t15 min shower",
        ),
        departure_buffer=BufferedTime(
            date=datetime(2026, 10, 19, 7, 5),
            message="\t35 min biking to Dublin/Pleasanton station",
        ),
    )


def test_display_plan_prints_report_in_order(plan: CommutePlan) -> None:
    """Given a plan, when displaying, then prints recommendation, train and breakdown in order."""
    stream = _Stream("utf-8")

    ConsoleReportPrinter(stream=stream).display_plan(plan)

    assert stream.getvalue() == (
        "\n"
        "👉 Leave by 07:05 AM\n"
        "(Catching the 7:40 AM train to arrive at 8:28 AM)\n"
        "\n"
        "That takes into account:\n"
        "\t35 min biking to Dublin/Pleasanton station\n"
        "\t48 min on the train\n"
        "\t10 min biking from Civic Center\n"
        "\t15 min shower\n"
    )


def test_when_stream_not_utf8_then_uses_ascii_marker(plan: CommutePlan) -> None:
    """Given a non-UTF-8 stream, when formatting, then the emoji is replaced."""
    lines = ConsoleReportPrinter(stream=_Stream("ascii")).format_plan(plan)

    assert lines[1] == "-> Leave by 07:05 AM"


def test_when_no_stream_given_then_prints_to_stdout(
    plan: CommutePlan, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given no stream, when displaying, then the report goes to stdout."""
    ConsoleReportPrinter().display_plan(plan)

    out = capsys.readouterr().out
    assert "Leave by 07:05 AM" in out
    assert "\t48 min on the train" in out
