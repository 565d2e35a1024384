"""Search Route — free-text chord search relayed to the upstream service.

Invariants:
    - Empty or missing q → 400 before any outbound call
    - Results are returned in the order the upstream client produced them
    - Any UpstreamError → logged with full detail, surfaced as SearchFailedError (500)
"""

import logging

from fastapi import APIRouter, Depends

from tabrelay.api.dependencies import get_upstream_client
from tabrelay.core.errors import (
    MissingQueryParameterError, SearchFailedError, UpstreamError,
)
from tabrelay.infrastructure.upstream_client import UpstreamTabClient
from tabrelay.schemas.tab import ErrorPayload, SearchResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["search"])


@router.get(
    "/search",
    response_model=SearchResponse,
    responses={400: {"model": ErrorPayload}, 500: {"model": ErrorPayload}},
)
async def search_tabs(
    q: str | None = None,
    client: UpstreamTabClient = Depends(get_upstream_client),
):
    """Search upstream chords matching q."""
    if not q:
        raise MissingQueryParameterError("q")
    try:
        results = await client.search(q)
    except UpstreamError as e:
        logger.error(
            f"Search error: {e.message}",
            extra={
                "error_code": e.code,
                "query": q,
                "upstream_status": getattr(e, "status_code", None),
            },
        )
        raise SearchFailedError() from e
    return SearchResponse(results=results)
