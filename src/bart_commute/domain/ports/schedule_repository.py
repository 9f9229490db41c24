"""Schedule repository port."""

from datetime import datetime
from typing import Protocol

from bart_commute.domain.models.station import StationRole
from bart_commute.domain.models.trip import Trip


class ScheduleRepository(Protocol):
    """Port for looking up scheduled trips between the two commute stations."""

    async def find_trip_arriving_by(self, arrive_by: datetime, destination: StationRole) -> Trip:
        """Get the latest trip to destination that arrives no later than arrive_by."""
        ...
