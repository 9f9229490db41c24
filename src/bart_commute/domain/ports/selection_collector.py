"""Selection collector port."""

from abc import ABC, abstractmethod

from bart_commute.domain.models.user_selection import UserSelection


class SelectionCollector(ABC):
    """Port for asking the user where and when they want to arrive."""

    @abstractmethod
    def collect(self) -> UserSelection:
        """Collect the destination and desired arrival."""
        ...
