"""Ports (interfaces) for the ports-and-adapters architecture."""

from bart_commute.domain.ports.report_display import ReportDisplay
from bart_commute.domain.ports.schedule_repository import ScheduleRepository
from bart_commute.domain.ports.selection_collector import SelectionCollector

__all__ = [
    "ReportDisplay",
    "ScheduleRepository",
    "SelectionCollector",
]
