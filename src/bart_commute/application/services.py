"""Application services (use cases) for commute planning."""

import logging
from typing import TYPE_CHECKING

from bart_commute.application.buffer_calculator import BufferCalculator
from bart_commute.domain.models import CommutePlan, CommuteSettings, UserSelection

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from bart_commute.domain.ports import ScheduleRepository


class CommutePlanner:
    """Service turning a desired arrival into a leave-by recommendation."""

    def __init__(
        self, settings: CommuteSettings, schedule_repository: "ScheduleRepository"
    ) -> None:
        """Initialize with commute settings and a schedule repository."""
        self._buffers = BufferCalculator(settings)
        self._schedule_repository = schedule_repository

    async def plan(self, selection: UserSelection) -> CommutePlan:
        """Plan the commute for a user selection.

        The desired arrival is moved earlier by the last-mile buffers, the
        latest train arriving by then is looked up, and its departure is moved
        earlier by the first-mile buffer.
        """
        arrival_buffer = self._buffers.buffered_arrival(selection.arrival, selection.destination)
        logger.info(
            f"Looking up trip to {selection.destination.value} arriving by {arrival_buffer.date}"
        )

        trip = await self._schedule_repository.find_trip_arriving_by(
            arrival_buffer.date, selection.destination
        )
        logger.info(
            f"Found trip {trip.origin} -> {trip.destination} departing {trip.departure_label}"
        )

        departure_buffer = self._buffers.buffered_departure(trip.departure, selection.destination)
        return CommutePlan(
            selection=selection,
            trip=trip,
            arrival_buffer=arrival_buffer,
            departure_buffer=departure_buffer,
        )
