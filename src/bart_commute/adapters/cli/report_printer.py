"""Console output of a commute plan."""

import sys
from typing import TextIO

from bart_commute.domain.time_formatter import format_clock_time
from bart_commute.domain.models import CommutePlan
from bart_commute.domain.ports.report_display import ReportDisplay

LEAVE_MARKER = "👉"
LEAVE_MARKER_ASCII = "->"


def _supports_utf8(stream: TextIO) -> bool:
    """Check whether the stream can print emoji."""
    encoding = getattr(stream, "encoding", None) or ""
    return "UTF" in encoding.upper()


class ConsoleReportPrinter(ReportDisplay):
    """Prints the leave-by recommendation and the buffers behind it."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize with an output stream (defaults to stdout)."""
        self._stream = stream

    def _output(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def format_plan(self, plan: CommutePlan) -> list[str]:
        """Render a plan as report lines."""
        marker = LEAVE_MARKER if _supports_utf8(self._output()) else LEAVE_MARKER_ASCII
        trip = plan.trip
        return [
            "",
            f"{marker} Leave by {format_clock_time(plan.leave_by)}",
            f"(Catching the {trip.departure_label} train to arrive at {trip.arrival_label})",
            "",
            "That takes into account:",
            plan.departure_buffer.message,
            f"\t{trip.duration_minutes} min on the train",
            plan.arrival_buffer.message,
        ]

    def display_plan(self, plan: CommutePlan) -> None:
        """Print the report."""
        stream = self._output()
        for line in self.format_plan(plan):
            print(line, file=stream)
