"""Tests for domain models."""

from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from bart_commute.domain.models import (
    BufferedTime,
    CommutePlan,
    CommuteSettings,
    Station,
    StationRole,
    Trip,
    UserSelection,
)


def test_station_role_other_returns_opposite_endpoint() -> None:
    """Given either role, when asking for the other, then returns the opposite one."""
    assert StationRole.WORK.other() is StationRole.HOME
    assert StationRole.HOME.other() is StationRole.WORK


def test_station_creation() -> None:
    """Given station data, when creating a Station, then all fields are set correctly."""
    station = Station(code="CIVC", name="Civic Center")

    assert station.code == "CIVC"
    assert station.name == "Civic Center"


def test_commute_settings_defaults() -> None:
    """Given no arguments, when creating CommuteSettings, then the fixed commute is used."""
    settings = CommuteSettings()

    assert settings.work_station == Station(code="CIVC", name="Civic Center")
    assert settings.home_station == Station(code="DUBL", name="Dublin/Pleasanton")
    assert settings.bike_home_station_minutes == 35
    assert settings.bike_work_station_minutes == 10
    assert settings.shower_minutes == 15
    assert settings.api_base_url == "https://api2.bart.gov/api"


def test_commute_settings_station_for_maps_roles(settings: CommuteSettings) -> None:
    """Given settings, when looking up a role, then returns the matching station."""
    assert settings.station_for(StationRole.WORK).code == "CIVC"
    assert settings.station_for(StationRole.HOME).code == "DUBL"


def test_commute_settings_is_frozen(settings: CommuteSettings) -> None:
    """Given CommuteSettings, when trying to modify, then raises FrozenInstanceError."""
    with pytest.raises(FrozenInstanceError):
        settings.shower_minutes = 0  # type: ignore[misc]


def test_commute_plan_leave_by_is_departure_buffer_date(sample_trip: Trip) -> None:
    """Given a plan, when reading leave_by, then returns the buffered departure instant."""
    plan = CommutePlan(
        selection=UserSelection(destination=StationRole.WORK, arrival=datetime(2026, 10, 19, 9)),
        trip=sample_trip,
        arrival_buffer=BufferedTime(date=datetime(2026, 10, 19, 8, 35), message="a"),
        departure_buffer=BufferedTime(date=datetime(2026, 10, 19, 7, 5), message="d"),
    )

    assert plan.leave_by == datetime(2026, 10, 19, 7, 5)
