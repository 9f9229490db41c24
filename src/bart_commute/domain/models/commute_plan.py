"""Commute plan domain model."""

from dataclasses import dataclass
from datetime import datetime

from bart_commute.domain.models.buffered_time import BufferedTime
from bart_commute.domain.models.trip import Trip
from bart_commute.domain.models.user_selection import UserSelection


@dataclass(frozen=True)
class CommutePlan:
    """Everything needed to tell the user when to leave."""

    selection: UserSelection
    trip: Trip
    arrival_buffer: BufferedTime  # Effective query time before last-mile buffers
    departure_buffer: BufferedTime  # Leave-by time before first-mile buffer

    @property
    def leave_by(self) -> datetime:
        """Moment the user must personally set off."""
        return self.departure_buffer.date
