"""Domain layer - core business logic and models."""

from bart_commute.domain.models import (
    BufferedTime,
    CommutePlan,
    CommuteSettings,
    Station,
    StationRole,
    Trip,
    UserSelection,
)
from bart_commute.domain.ports import (
    ReportDisplay,
    ScheduleRepository,
    SelectionCollector,
)

__all__ = [
    "BufferedTime",
    "CommutePlan",
    "CommuteSettings",
    "ReportDisplay",
    "ScheduleRepository",
    "SelectionCollector",
    "Station",
    "StationRole",
    "Trip",
    "UserSelection",
]
