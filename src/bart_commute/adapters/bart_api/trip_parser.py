"""Parser for BART schedule responses (sched.aspx, JSON format)."""

import logging
from typing import Any

from bart_commute.domain.time_formatter import parse_schedule_datetime
from bart_commute.domain.errors import (
    MalformedScheduleResponseError,
    ScheduleApiError,
    TripNotFoundError,
)
from bart_commute.domain.models import Trip

logger = logging.getLogger(__name__)

REQUIRED_TRIP_FIELDS = ("@origTimeDate", "@origTimeMin", "@destTimeMin", "@tripTime")


class TripParser:
    """Parses BART schedule responses into Trip objects."""

    @staticmethod
    def parse_trip(payload: Any) -> Trip:
        """Extract the trip from a schedule response.

        Args:
            payload: Decoded JSON body of a sched.aspx request.

        Returns:
            The latest trip arriving by the requested time.

        Raises:
            ScheduleApiError: If the API reported an error.
            TripNotFoundError: If the response holds no trip.
            MalformedScheduleResponseError: If the response does not have the expected shape.
        """
        root = TripParser._get_root(payload)
        TripParser._raise_for_api_error(root)
        trip_data = TripParser._select_trip(TripParser._extract_trips(root))
        return TripParser._parse_trip_data(trip_data)

    @staticmethod
    def _get_root(payload: Any) -> dict[str, Any]:
        """Get the root object every BART response is wrapped in."""
        root = payload.get("root") if isinstance(payload, dict) else None
        if not isinstance(root, dict):
            raise MalformedScheduleResponseError("Schedule response has no 'root' object")
        return root

    @staticmethod
    def _raise_for_api_error(root: dict[str, Any]) -> None:
        """Raise if the API answered with an error message instead of a schedule."""
        message = root.get("message")
        if not isinstance(message, dict):
            return
        error = message.get("error")
        if not error:
            return
        if isinstance(error, dict):
            text = error.get("text", "")
            details = error.get("details", "")
            reason = f"{text}: {details}" if text and details else text or details
        else:
            reason = str(error)
        raise ScheduleApiError(f"BART API error: {reason or 'unknown error'}")

    @staticmethod
    def _extract_trips(root: dict[str, Any]) -> list[dict[str, Any]]:
        """Get the trips under root.schedule.request.trip as a list."""
        schedule = root.get("schedule")
        request = schedule.get("request") if isinstance(schedule, dict) else None
        trips = request.get("trip") if isinstance(request, dict) else None
        if isinstance(trips, dict):
            return [trips] if trips else []
        if isinstance(trips, list):
            return [t for t in trips if isinstance(t, dict)]
        return []

    @staticmethod
    def _select_trip(trips: list[dict[str, Any]]) -> dict[str, Any]:
        """Pick the trip to recommend."""
        if not trips:
            raise TripNotFoundError("No trip found that arrives by the requested time")
        if len(trips) > 1:
            # Trips are ordered by time; the last one leaves latest.
            logger.debug(f"Schedule returned {len(trips)} trips, using the last one")
        return trips[-1]

    @staticmethod
    def _parse_trip_data(trip: dict[str, Any]) -> Trip:
        """Parse a single trip object into a Trip."""
        missing = [f for f in REQUIRED_TRIP_FIELDS if not trip.get(f)]
        if missing:
            raise MalformedScheduleResponseError(
                f"Trip is missing field(s): {', '.join(missing)}"
            )

        try:
            departure = parse_schedule_datetime(trip["@origTimeDate"], trip["@origTimeMin"])
            duration_minutes = int(str(trip["@tripTime"]).strip())
        except ValueError as e:
            raise MalformedScheduleResponseError(f"Trip has an invalid value: {e}") from e

        return Trip(
            origin=str(trip.get("@origin", "")),
            destination=str(trip.get("@destination", "")),
            departure=departure,
            departure_label=str(trip["@origTimeMin"]).strip(),
            arrival_label=str(trip["@destTimeMin"]).strip(),
            duration_minutes=duration_minutes,
        )
