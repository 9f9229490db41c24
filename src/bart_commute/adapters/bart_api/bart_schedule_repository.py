"""BART schedule repository adapter using the BART legacy API.

API Documentation: https://api.bart.gov/docs/sched/arrive.aspx
"""

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from bart_commute.adapters.api_request_logger import log_api_request
from bart_commute.adapters.bart_api.http_client import BartHttpClient
from bart_commute.adapters.bart_api.query_builder import (
    build_schedule_params,
    build_schedule_url,
    schedule_endpoint,
)
from bart_commute.adapters.bart_api.trip_parser import TripParser
from bart_commute.domain.models import CommuteSettings, StationRole, Trip
from bart_commute.domain.ports.schedule_repository import ScheduleRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class BartScheduleRepository(ScheduleRepository):
    """Adapter for looking up trips with the BART schedule API."""

    def __init__(
        self,
        settings: CommuteSettings,
        session: "ClientSession",
        timeout_seconds: float | None = None,
        log_requests: bool = False,
    ) -> None:
        """Initialize with commute settings and an aiohttp session.

        Args:
            settings: Stations and API access used to build the query.
            session: aiohttp ClientSession for HTTP requests.
            timeout_seconds: Optional total request timeout.
            log_requests: Log each outgoing request, with the access key redacted.
        """
        self._settings = settings
        self._log_requests = log_requests
        self._http_client = BartHttpClient(session=session, timeout_seconds=timeout_seconds)

    async def find_trip_arriving_by(self, arrive_by: datetime, destination: StationRole) -> Trip:
        """Get the latest trip to destination arriving no later than arrive_by.

        Args:
            arrive_by: Effective query time (desired arrival minus buffers).
            destination: Station the user travels to.

        Returns:
            Trip parsed from the schedule response.
        """
        url = build_schedule_url(arrive_by, destination, self._settings)
        log_api_request(
            "GET",
            schedule_endpoint(self._settings),
            build_schedule_params(arrive_by, destination, self._settings),
            enabled=self._log_requests,
        )

        payload = await self._http_client.fetch_json(url)
        trip = TripParser.parse_trip(payload)
        logger.debug(f"Parsed trip: {trip}")
        return trip
