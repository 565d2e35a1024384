"""Tab Routes — fetch a tab by id, and resolve a tab page URL into song metadata.

Invariants:
    - /tab/{id}: id must be a base-10 integer, else 400 before any outbound call
    - /tab/{id}: any UpstreamError → logged with full detail, surfaced as TabFetchFailedError (500)
    - /tab/{id}: TabDetail returned flat (not wrapped)
    - /tab-url: pure parsing, never calls the upstream service

Design Decisions:
    - {tab_id:path} so that "/tab/" (empty id) and "/tab/1/2" reach the handler
      and get "Invalid tab ID" instead of a routing 404
"""

import logging

from fastapi import APIRouter, Depends

from tabrelay.api.dependencies import get_upstream_client
from tabrelay.core.errors import (
    MissingQueryParameterError,
    TabFetchFailedError,
    UnparsableTabUrlError,
    UpstreamError,
)
from tabrelay.core.tab_id import parse_tab_id
from tabrelay.core.tab_url import parse_tab_url
from tabrelay.infrastructure.upstream_client import UpstreamTabClient
from tabrelay.schemas.tab import ErrorPayload, TabDetail, TabUrlInfo

logger = logging.getLogger(__name__)
router = APIRouter(tags=["tabs"])


@router.get(
    "/tab/{tab_id:path}",
    response_model=TabDetail,
    responses={400: {"model": ErrorPayload}, 500: {"model": ErrorPayload}},
)
async def get_tab(
    tab_id: str,
    client: UpstreamTabClient = Depends(get_upstream_client),
):
    """Fetch a single tab by its upstream id."""
    parsed_id = parse_tab_id(tab_id)
    try:
        return await client.fetch_tab(parsed_id)
    except UpstreamError as e:
        logger.error(
            f"Fetch error: {e.message}",
            extra={
                "error_code": e.code,
                "tab_id": parsed_id,
                "upstream_status": getattr(e, "status_code", None),
            },
        )
        raise TabFetchFailedError() from e


@router.get(
    "/tab-url",
    response_model=TabUrlInfo,
    responses={400: {"model": ErrorPayload}},
)
async def resolve_tab_url(url: str | None = None):
    """Derive artist, song name, type and id from a tab page URL."""
    if not url:
        raise MissingQueryParameterError("url")
    parts = parse_tab_url(url)
    if parts is None:
        raise UnparsableTabUrlError(url)
    return TabUrlInfo(
        artist=parts.artist,
        song_name=parts.song_name,
        tab_type=parts.tab_type,
        tab_id=parts.tab_id,
    )
