"""Shared fixtures for commute planner tests."""

from collections.abc import Callable
from datetime import datetime
from typing import Any

import pytest

from bart_commute.domain.models import CommuteSettings, Trip


def _wrap_in_schedule(trip: Any) -> dict[str, Any]:
    """Wrap trip data the way sched.aspx does."""
    return {
        "root": {
            "origin": "DUBL",
            "destination": "CIVC",
            "schedule": {
                "date": "Oct 19, 2026",
                "time": "8:35 AM",
                "before": "0",
                "after": "0",
                "request": {"trip": trip},
            },
            "message": "",
        }
    }


@pytest.fixture
def settings() -> CommuteSettings:
    """Default commute settings (CIVC work, DUBL home, 35/10/15 minute buffers)."""
    return CommuteSettings()


@pytest.fixture
def sample_trip() -> Trip:
    """A morning trip from Dublin/Pleasanton to Civic Center."""
    return Trip(
        origin="DUBL",
        destination="CIVC",
        departure=datetime(2026, 10, 19, 7, 40),
        departure_label="7:40 AM",
        arrival_label="8:28 AM",
        duration_minutes=48,
    )


@pytest.fixture
def trip_data() -> dict[str, Any]:
    """A trip object as found in a sched.aspx JSON response."""
    return {
        "@origin": "DUBL",
        "@destination": "CIVC",
        "@fare": "6.15",
        "@origTimeMin": "7:40 AM",
        "@origTimeDate": "10/19/2026 ",
        "@destTimeMin": "8:28 AM",
        "@destTimeDate": "10/19/2026",
        "@tripTime": "48",
        "leg": [],
    }


@pytest.fixture
def wrap_in_schedule() -> Callable[[Any], dict[str, Any]]:
    """Factory wrapping trip data in a sched.aspx response body."""
    return _wrap_in_schedule


@pytest.fixture
def schedule_payload(trip_data: dict[str, Any]) -> dict[str, Any]:
    """A successful sched.aspx response holding one trip."""
    return _wrap_in_schedule(trip_data)
