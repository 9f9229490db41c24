"""HTTP client for BART API requests."""

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

import aiohttp
from yarl import URL

from bart_commute.adapters.bart_api.constants import DEFAULT_HEADERS
from bart_commute.domain.errors import ScheduleUnavailableError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class BartHttpClient:
    """HTTP client issuing BART API requests and decoding their JSON bodies."""

    def __init__(self, session: "ClientSession", timeout_seconds: float | None = None) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            timeout_seconds: Total request timeout. None waits until the transport gives up.
        """
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def _log_error_response(self, response: "ClientResponse", url: str) -> None:
        """Log error response details."""
        error_text = await response.text()
        error_body = error_text[:500] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        logger.error(
            f"BART API returned status {response.status} for {url}: "
            f"{error_body} (Content-Type: {content_type})"
        )

    async def _handle_response(self, response: "ClientResponse", url: str) -> Any:
        """Decode a successful response or raise."""
        if response.status != 200:
            await self._log_error_response(response, url)
            raise ScheduleUnavailableError(f"BART API returned status {response.status}")

        body = await response.text()
        try:
            return json.loads(body)
        except ValueError as e:
            logger.error(f"BART API returned a non-JSON body for {url}: {body[:200]}")
            raise ScheduleUnavailableError("BART API returned a response that is not JSON") from e

    async def fetch_json(self, url: str) -> Any:
        """Fetch a BART API URL and return its decoded JSON body.

        The URL is sent as is, without re-encoding its query string.

        Raises:
            ScheduleUnavailableError: On network errors, timeouts, non-200
                statuses and non-JSON bodies.
        """
        try:
            async with self._session.get(
                URL(url, encoded=True), headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                return await self._handle_response(response, url)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Error fetching BART schedule from {url}: {e!r}")
            raise ScheduleUnavailableError(f"Could not reach the BART API: {e!r}") from e
