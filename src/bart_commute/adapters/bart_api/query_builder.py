"""Builds schedule lookup URLs for the BART API."""

from datetime import datetime

from bart_commute.adapters.bart_api.constants import (
    ARRIVE_COMMAND,
    JSON_FORMAT_PARAMS,
    SCHEDULE_PATH,
    TRIPS_AFTER,
    TRIPS_BEFORE,
)
from bart_commute.domain.time_formatter import format_date, format_time
from bart_commute.domain.models import CommuteSettings, StationRole


def schedule_endpoint(settings: CommuteSettings) -> str:
    """Get the absolute URL of the schedule lookup endpoint."""
    return f"{settings.api_base_url}/{SCHEDULE_PATH}"


def build_schedule_params(
    arrive_by: datetime, destination: StationRole, settings: CommuteSettings
) -> dict[str, str]:
    """Build query parameters asking for the best trip that arrives by arrive_by.

    The origin is always the station that is not the destination.
    """
    return {
        "key": settings.api_key,
        **JSON_FORMAT_PARAMS,
        "a": TRIPS_AFTER,
        "b": TRIPS_BEFORE,
        "cmd": ARRIVE_COMMAND,
        "orig": settings.station_for(destination.other()).code,
        "dest": settings.station_for(destination).code,
        "date": format_date(arrive_by),
        "time": format_time(arrive_by),
    }


def build_schedule_url(
    arrive_by: datetime, destination: StationRole, settings: CommuteSettings
) -> str:
    """Build the full schedule lookup URL.

    Values are not percent-encoded: the API expects literal slashes in the
    date and reads "+" in the time as a space.

    Example:
        https://api2.bart.gov/api/sched.aspx?key=...&json=y&a=0&b=0&cmd=arrive
        &orig=DUBL&dest=CIVC&date=01/26/2023&time=08:35+AM
    """
    params = build_schedule_params(arrive_by, destination, settings)
    query = "&".join(f"{k}={v}" for k, v in params.items())
    return f"{schedule_endpoint(settings)}?{query}"
