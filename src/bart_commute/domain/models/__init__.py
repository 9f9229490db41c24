"""Domain models for BART commute planning."""

from bart_commute.domain.models.buffered_time import BufferedTime
from bart_commute.domain.models.commute_plan import CommutePlan
from bart_commute.domain.models.commute_settings import CommuteSettings
from bart_commute.domain.models.station import Station, StationRole
from bart_commute.domain.models.trip import Trip
from bart_commute.domain.models.user_selection import UserSelection

__all__ = [
    "BufferedTime",
    "CommutePlan",
    "CommuteSettings",
    "Station",
    "StationRole",
    "Trip",
    "UserSelection",
]
