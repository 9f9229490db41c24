"""Trip domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Trip:
    """A single scheduled train trip returned by the schedule lookup."""

    origin: str
    destination: str
    departure: datetime  # Origin departure instant
    departure_label: str  # Origin departure clock label as sent by the API (e.g., "8:10 AM")
    arrival_label: str  # Destination arrival clock label (e.g., "9:07 AM")
    duration_minutes: int
