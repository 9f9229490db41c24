"""Station domain models."""

from dataclasses import dataclass
from enum import Enum


class StationRole(Enum):
    """The two fixed endpoints of the commute."""

    WORK = "work"
    HOME = "home"

    def other(self) -> "StationRole":
        """Return the opposite endpoint."""
        return StationRole.HOME if self is StationRole.WORK else StationRole.WORK


@dataclass(frozen=True)
class Station:
    """Represents a BART station."""

    code: str  # BART abbreviation (e.g., "CIVC")
    name: str  # Display name (e.g., "Civic Center")
