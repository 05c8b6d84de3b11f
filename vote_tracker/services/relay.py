"""Relay for the Senate and House roll-call feeds.

Browsers cannot call senate.gov or clerk.house.gov directly (no CORS), so the
app fetches them server-side and hands the upstream status and body back
untouched.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from vote_tracker.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

JSON_MEDIA_TYPE = "application/json"
XML_MEDIA_TYPE = "application/xml"
TEXT_MEDIA_TYPE = "text/plain"


@dataclass
class RelayResponse:
    """Status and body to hand back to the caller."""

    status_code: int
    content: bytes
    media_type: str

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class ProxyRelay:
    """One-shot passthrough client for the government vote feeds."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.senate_base_url = settings.senate_base_url
        self.house_base_url = settings.house_base_url
        self.timeout = settings.http_timeout
        # Tests swap in httpx.MockTransport here
        self.transport = transport

    def senate_menu_url(self, congress: int, session: int) -> str:
        return f"{self.senate_base_url}/vote_menu_{congress}_{session}.json"

    def house_rolls_url(self, year: int) -> str:
        return f"{self.house_base_url}/{year}/ROLLS.xml"

    async def get_senate_menu(self, congress: int, session: int) -> RelayResponse:
        """Fetch the Senate vote menu for a congress session."""
        return await self._relay(
            self.senate_menu_url(congress, session),
            media_type=JSON_MEDIA_TYPE,
            source="Senate",
        )

    async def get_house_rolls(self, year: int) -> RelayResponse:
        """Fetch the House Clerk's roll list for a calendar year."""
        return await self._relay(
            self.house_rolls_url(year),
            media_type=XML_MEDIA_TYPE,
            source="House",
        )

    async def _relay(self, url: str, media_type: str, source: str) -> RelayResponse:
        """GET the upstream URL and wrap whatever comes back.

        Non-2xx answers are relayed as-is. Only a failure to get any answer
        turns into a 500 with a short message.
        """
        try:
            async with httpx.AsyncClient(
                transport=self.transport,
                timeout=self.timeout,
                follow_redirects=True,
            ) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            logger.error("Error fetching %s data: %s", source, exc)
            return RelayResponse(
                status_code=500,
                content=f"Error fetching data from {source} API".encode(),
                media_type=TEXT_MEDIA_TYPE,
            )

        if not response.is_success:
            logger.warning(
                "%s upstream answered HTTP %d for %s", source, response.status_code, url
            )

        return RelayResponse(
            status_code=response.status_code,
            content=response.content,
            media_type=media_type,
        )


relay_client = ProxyRelay()
