"""Adapters layer - external system integrations."""

from bart_commute.adapters.bart_api import BartScheduleRepository
from bart_commute.adapters.cli import ConsoleReportPrinter, PromptSelectionCollector
from bart_commute.adapters.config import AppConfig

__all__ = [
    "AppConfig",
    "BartScheduleRepository",
    "ConsoleReportPrinter",
    "PromptSelectionCollector",
]
