"""Console adapters: interactive prompts and report output."""

from bart_commute.adapters.cli.prompt_collector import PromptSelectionCollector
from bart_commute.adapters.cli.report_printer import ConsoleReportPrinter

__all__ = ["ConsoleReportPrinter", "PromptSelectionCollector"]
