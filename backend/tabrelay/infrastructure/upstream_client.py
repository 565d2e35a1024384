"""Upstream Tab Client — wraps httpx.AsyncClient with error mapping for the tab-hosting API.

Invariants:
    - Exactly one outbound GET per search()/fetch_tab() call: no retries, no caching
    - Every request sends the fixed mobile User-Agent and Accept: application/json
    - Transport failures (DNS, connect, TLS, timeout) -> UpstreamTransportError
    - Any status other than 200 -> UpstreamStatusError with status code and raw body
    - Non-JSON or wrongly-shaped body -> UpstreamDecodeError
    - fetch_tab() trims surrounding whitespace from content only

Design Decisions:
    - One pooled AsyncClient per application, owned by the FastAPI lifespan
    - timeout_seconds=None means no deadline at all (httpx.Timeout(None))
    - Redirects are followed; only the final response is classified
    - transport is injectable so tests can use httpx.MockTransport instead of the network
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from tabrelay.core.errors import (
    UpstreamDecodeError,
    UpstreamStatusError,
    UpstreamTransportError,
)
from tabrelay.schemas.tab import SearchResponse, SearchResultItem, TabDetail

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.ultimate-guitar.com/api/v1/tab"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 14_0 like Mac OS X) "
    "AppleWebKit/605.1.15"
)
SEARCH_PAGE = "1"
SEARCH_TYPE = "Chords"


class UpstreamTabClient:
    """Calls the tab-hosting JSON API and reshapes its answers into local schemas."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout_seconds),
            headers={
                "User-Agent": user_agent,
                "Accept": "application/json",
            },
            transport=transport,
            follow_redirects=True,
        )

    async def search(self, query: str) -> list[SearchResultItem]:
        """Search chords by free text; results keep upstream order."""
        payload = await self._get_json(
            f"{self.base_url}/search",
            params={"query": query, "page": SEARCH_PAGE, "type": SEARCH_TYPE},
        )
        try:
            return list(SearchResponse.model_validate(payload).results)
        except ValidationError as e:
            raise UpstreamDecodeError(str(e))

    async def fetch_tab(self, tab_id: int) -> TabDetail:
        """Fetch one tab by id with its content whitespace-trimmed."""
        payload = await self._get_json(f"{self.base_url}/{tab_id}")
        try:
            tab = TabDetail.model_validate(payload)
        except ValidationError as e:
            raise UpstreamDecodeError(str(e))
        return tab.model_copy(update={"content": tab.content.strip()})

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _get_json(
        self, url: str, params: dict[str, str] | None = None,
    ) -> Any:
        """Send one GET and classify the outcome: transport, status, decode."""
        try:
            response = await self.client.get(url, params=params)
        except httpx.TimeoutException as e:
            raise UpstreamTransportError(url, e, timed_out=True)
        except httpx.HTTPError as e:
            raise UpstreamTransportError(url, e)

        if response.status_code != httpx.codes.OK:
            raise UpstreamStatusError(response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamDecodeError(str(e))
        logger.debug(
            "Upstream call succeeded",
            extra={"upstream_url": str(response.url),
                   "upstream_status": response.status_code},
        )
        return payload
