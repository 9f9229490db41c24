"""Report display port."""

from abc import ABC, abstractmethod

from bart_commute.domain.models.commute_plan import CommutePlan


class ReportDisplay(ABC):
    """Port for presenting a commute plan to the user."""

    @abstractmethod
    def display_plan(self, plan: CommutePlan) -> None:
        """Display the recommendation and its breakdown."""
        ...
