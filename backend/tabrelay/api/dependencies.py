"""Route dependencies — access to per-application resources."""

from fastapi import Request

from tabrelay.infrastructure.upstream_client import UpstreamTabClient


def get_upstream_client(request: Request) -> UpstreamTabClient:
    """Return the pooled upstream client created by the lifespan."""
    return request.app.state.upstream_client
