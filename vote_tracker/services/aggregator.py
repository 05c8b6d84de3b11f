"""Vote aggregator: fetches both chambers through the relay and merges them."""

import json
import logging
from typing import Optional

import httpx
from lxml import etree

from vote_tracker.config import get_settings
from vote_tracker.models import Vote, VoteSettings
from vote_tracker.services.errors import (
    ChamberSelectionError,
    PayloadError,
    RelayNetworkError,
    UpstreamHTTPError,
    VoteFetchError,
)
from vote_tracker.services.fetch_result import FetchResult
from vote_tracker.services.parsers import (
    parse_house_rolls,
    parse_house_xml,
    parse_senate_menu,
    sort_votes,
)

logger = logging.getLogger(__name__)

settings = get_settings()

SENATE_LABEL = "Senate Votes"
HOUSE_LABEL = "House Votes"

# Base URL used when talking to the relay routes through an ASGI transport
IN_PROCESS_BASE_URL = "http://relay"


class VoteAggregator:
    """Fetches the selected chambers from the relay and merges the results.

    The fetch is all-or-nothing: a failure on either chamber discards what
    the other one returned.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.relay_base_url or IN_PROCESS_BASE_URL
        self.transport = transport
        self.timeout = settings.http_timeout

    async def fetch_votes(self, vote_settings: VoteSettings) -> FetchResult:
        """Fetch, normalize and merge votes for the selected chambers.

        Returns:
            FetchResult with votes newest first, or a single error message
            and no votes if anything went wrong.
        """
        votes: list[Vote] = []
        try:
            if not vote_settings.has_chamber:
                raise ChamberSelectionError()
            votes = await self._fetch_selected(vote_settings)
        except VoteFetchError as exc:
            logger.error("Vote fetch aborted: %s", exc)
            return FetchResult.failed(str(exc), status_code=exc.status_code)

        merged = sort_votes(votes)
        logger.info("Fetched %d votes", len(merged))
        return FetchResult.success(merged)

    async def _fetch_selected(self, vote_settings: VoteSettings) -> list[Vote]:
        """Fetch each selected chamber in turn, Senate first."""
        logger.info(
            "Fetching votes for congress %d session %d (senate=%s, house=%s)",
            vote_settings.congress,
            vote_settings.session,
            vote_settings.include_senate,
            vote_settings.include_house,
        )

        votes: list[Vote] = []
        async with httpx.AsyncClient(
            base_url=self.base_url,
            transport=self.transport,
            timeout=self.timeout,
        ) as client:
            if vote_settings.include_senate:
                votes.extend(await self._fetch_senate(client, vote_settings))
            if vote_settings.include_house:
                votes.extend(await self._fetch_house(client, vote_settings))
        return votes

    async def _fetch_senate(
        self, client: httpx.AsyncClient, vote_settings: VoteSettings
    ) -> list[Vote]:
        congress, session = vote_settings.congress, vote_settings.session
        response = await self._get(
            client,
            f"/api/senate/{congress}/{session}",
            SENATE_LABEL,
            accept="application/json",
        )
        text = response.text
        try:
            data = json.loads(text)
        except ValueError:
            raise PayloadError.invalid_json(SENATE_LABEL, text)

        return parse_senate_menu(data, congress, session)

    async def _fetch_house(
        self, client: httpx.AsyncClient, vote_settings: VoteSettings
    ) -> list[Vote]:
        year = vote_settings.year
        response = await self._get(
            client,
            f"/api/house/{year}",
            HOUSE_LABEL,
            accept="application/xml,text/xml",
        )
        # Raw bytes, so lxml honors the document's own encoding declaration
        try:
            root = parse_house_xml(response.content)
        except etree.XMLSyntaxError as exc:
            raise PayloadError.invalid_xml(HOUSE_LABEL, str(exc))

        return parse_house_rolls(root, year)

    async def _get(
        self, client: httpx.AsyncClient, path: str, label: str, accept: str
    ) -> httpx.Response:
        """GET a relay path and return the successful response, raising on any failure."""
        try:
            response = await client.get(path, headers={"Accept": accept})
        except httpx.HTTPError as exc:
            raise RelayNetworkError(label, exc)

        if not response.is_success:
            raise UpstreamHTTPError(label, response.status_code, response.text)
        return response
