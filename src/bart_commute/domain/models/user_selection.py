"""User selection domain model."""

from dataclasses import dataclass
from datetime import datetime

from bart_commute.domain.models.station import StationRole


@dataclass(frozen=True)
class UserSelection:
    """Destination and desired arrival collected from the user."""

    destination: StationRole
    arrival: datetime
