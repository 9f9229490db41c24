"""Buffers between the train and the user's own start and end of the trip."""

import logging
from datetime import datetime, timedelta

from bart_commute.domain.models import BufferedTime, CommuteSettings, StationRole

logger = logging.getLogger(__name__)


class BufferCalculator:
    """Shifts instants by the biking and shower buffers of a commute.

    The arrival side covers what happens after leaving the train at the
    destination station; the departure side covers getting to the origin
    station. Which physical ride applies depends on the destination.
    """

    def __init__(self, settings: CommuteSettings) -> None:
        """Initialize with commute settings."""
        self._settings = settings

    def buffered_arrival(self, desired_arrival: datetime, destination: StationRole) -> BufferedTime:
        """Get the latest moment the train may arrive for the user to be done by desired_arrival.

        Args:
            desired_arrival: When the user needs to be at the destination.
            destination: Where the user is going.

        Returns:
            Effective query time and a message listing the buffers.
        """
        settings = self._settings
        if destination is StationRole.WORK:
            minutes = settings.bike_work_station_minutes + settings.shower_minutes
            message = (
                f"\t{settings.bike_work_station_minutes} min biking from "
                f"{settings.work_station.name}\n"
                f"\t{settings.shower_minutes} min shower"
            )
        else:
            minutes = settings.bike_home_station_minutes
            message = f"\t{settings.bike_home_station_minutes} min biking home"

        buffered = desired_arrival - timedelta(minutes=minutes)
        logger.debug(f"Arrival {desired_arrival} buffered by {minutes} min to {buffered}")
        return BufferedTime(date=buffered, message=message)

    def buffered_departure(
        self, actual_departure: datetime, destination: StationRole
    ) -> BufferedTime:
        """Get the moment the user must leave to catch a train departing at actual_departure.

        Args:
            actual_departure: Scheduled departure of the train at the origin station.
            destination: Where the user is going; the origin is the other station.

        Returns:
            Leave-by time and a message naming the ride to the origin station.
        """
        settings = self._settings
        if destination is StationRole.WORK:
            minutes = settings.bike_home_station_minutes
            station_name = settings.home_station.name
        else:
            minutes = settings.bike_work_station_minutes
            station_name = settings.work_station.name

        buffered = actual_departure - timedelta(minutes=minutes)
        logger.debug(f"Departure {actual_departure} buffered by {minutes} min to {buffered}")
        return BufferedTime(
            date=buffered,
            message=f"\t{minutes} min biking to {station_name} station",
        )
