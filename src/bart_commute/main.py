"""Main entry point for the BART commute planner."""

import asyncio
import logging
import sys

import aiohttp
from pydantic import ValidationError

from bart_commute.adapters.bart_api import BartScheduleRepository
from bart_commute.adapters.cli import ConsoleReportPrinter, PromptSelectionCollector
from bart_commute.adapters.config import AppConfig
from bart_commute.application.services import CommutePlanner
from bart_commute.domain.errors import CommuteError
from bart_commute.domain.models import CommutePlan, CommuteSettings, UserSelection
from bart_commute.domain.ports import ReportDisplay, SelectionCollector

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def configure_logging(level: str) -> None:
    """Configure logging to stderr so it never mixes with the report."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def plan_commute(
    settings: CommuteSettings,
    selection: UserSelection,
    timeout_seconds: float | None = None,
    log_requests: bool = False,
) -> CommutePlan:
    """Look up the trip for a selection and build the plan."""
    # One session for the single schedule request
    async with aiohttp.ClientSession() as session:
        schedule_repo = BartScheduleRepository(
            settings,
            session=session,
            timeout_seconds=timeout_seconds,
            log_requests=log_requests,
        )
        planner = CommutePlanner(settings, schedule_repo)
        return await planner.plan(selection)


def run(
    config: AppConfig,
    collector: SelectionCollector | None = None,
    display: ReportDisplay | None = None,
) -> int:
    """Run the prompt, lookup and report pipeline.

    Returns:
        Process exit code.
    """
    settings = config.to_commute_settings()
    collector = collector or PromptSelectionCollector(settings)
    display = display or ConsoleReportPrinter()

    try:
        selection = collector.collect()
        plan = asyncio.run(
            plan_commute(settings, selection, config.api_timeout_seconds, config.log_requests)
        )
    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_FAILURE
    except CommuteError as e:
        logger.debug("Commute planning failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except Exception as e:
        logger.exception("Unexpected error while planning the commute")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    display.display_plan(plan)
    return EXIT_OK


def main() -> None:
    """Synchronous entry point for the bart-commute command."""
    try:
        config = AppConfig()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(EXIT_FAILURE)

    configure_logging(config.log_level)
    sys.exit(run(config))


if __name__ == "__main__":
    main()
