"""Application layer - use cases."""

from bart_commute.application.buffer_calculator import BufferCalculator
from bart_commute.application.services import CommutePlanner

__all__ = ["BufferCalculator", "CommutePlanner"]
