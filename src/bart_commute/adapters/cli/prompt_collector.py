"""Interactive prompts asking where and when the user wants to arrive."""

import logging
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta
from typing import TypeVar

from bart_commute.domain.models import CommuteSettings, StationRole, UserSelection
from bart_commute.domain.ports.selection_collector import SelectionCollector

logger = logging.getLogger(__name__)

T = TypeVar("T")

TIME_INPUT_FORMAT = "%H:%M"
DAY_OFFSETS = (("today", 0), ("tomorrow", 1))


class PromptSelectionCollector(SelectionCollector):
    """Collects a UserSelection through line-based console prompts.

    Input, output and the clock are injectable so the prompts can be driven
    from tests.
    """

    def __init__(
        self,
        settings: CommuteSettings,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize with settings and optional I/O and clock overrides."""
        self._settings = settings
        self._read_line = read_line
        self._write = write
        self._clock = clock

    def collect(self) -> UserSelection:
        """Ask for destination, day and arrival time, in that order."""
        destination = self.choose_destination()
        default_arrival = self.choose_day()
        arrival = self.choose_arrival(default_arrival)
        logger.debug(f"Collected selection: {destination.value} by {arrival}")
        return UserSelection(destination=destination, arrival=arrival)

    def choose_destination(self) -> StationRole:
        """Ask where the user is going."""
        work = self._settings.work_station.name
        home = self._settings.home_station.name
        return self._choose(
            "Going where?",
            [
                ("Work", f"Work ({work})", StationRole.WORK),
                ("Home", f"Home ({home})", StationRole.HOME),
            ],
        )

    def choose_day(self) -> datetime:
        """Ask which day the trip is on.

        Returns:
            The next whole minute from now, shifted to the chosen day. Used as
            the default for choose_arrival, so an empty answer for today is
            still in the future.
        """
        offset = self._choose(
            "Which day?", [(label, label, days) for label, days in DAY_OFFSETS]
        )
        next_minute = self._clock().replace(second=0, microsecond=0) + timedelta(minutes=1)
        return next_minute + timedelta(days=offset)

    def choose_arrival(self, default_arrival: datetime) -> datetime:
        """Ask for the arrival time on the day of default_arrival.

        An empty answer keeps the time of default_arrival. Re-prompts until the
        answer is a valid HH:mm time strictly in the future.
        """
        prompt = (
            f"When do you need to be there? (HH:mm) "
            f"[{default_arrival.strftime(TIME_INPUT_FORMAT)}] "
        )
        while True:
            answer = self._read_line(prompt).strip()
            if answer:
                try:
                    clock_time = datetime.strptime(answer, TIME_INPUT_FORMAT).time()
                except ValueError:
                    self._write("Time must be in HH:mm format")
                    continue
                arrival = datetime.combine(default_arrival.date(), clock_time)
            else:
                arrival = default_arrival.replace(second=0, microsecond=0)

            if arrival <= self._clock():
                self._write("Date must be in the future")
                continue
            return arrival

    def _choose(self, question: str, choices: Sequence[tuple[str, str, T]]) -> T:
        """Ask a single-choice question until one of the choices is picked.

        Choices are (label, display text, value). The answer may be the
        choice's number or its label, case-insensitively.
        """
        self._write(question)
        for number, (_label, text, _value) in enumerate(choices, start=1):
            self._write(f"  {number}) {text}")

        while True:
            answer = self._read_line("> ").strip().lower()
            for number, (label, _text, value) in enumerate(choices, start=1):
                if answer in (str(number), label.lower()):
                    return value
            self._write(f"Please enter a number from 1 to {len(choices)}")
