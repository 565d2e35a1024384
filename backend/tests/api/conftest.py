"""API test fixtures — FastAPI app with a controllable upstream client.

Invariants:
    - get_upstream_client overridden with FakeUpstream: routes never open sockets
    - FakeUpstream records every call so tests can assert "adapter not invoked"

Design Decisions:
    - ASGITransport does not run the lifespan, so app.state.upstream_client is never
      built; the dependency override is the only upstream the routes see
"""

import pytest
from httpx import ASGITransport, AsyncClient

from tabrelay.api.dependencies import get_upstream_client
from tabrelay.main import create_app


class FakeUpstream:
    """Stand-in for UpstreamTabClient.

    search_result / tab_result may be a value or an exception instance to raise.
    """

    def __init__(self):
        self.calls = []
        self.search_result = []
        self.tab_result = None

    async def search(self, query):
        self.calls.append(("search", query))
        return self._resolve(self.search_result)

    async def fetch_tab(self, tab_id):
        self.calls.append(("fetch_tab", tab_id))
        return self._resolve(self.tab_result)

    @staticmethod
    def _resolve(result):
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def fake_upstream():
    return FakeUpstream()


@pytest.fixture
def app(settings, fake_upstream):
    application = create_app(settings)
    application.dependency_overrides[get_upstream_client] = lambda: fake_upstream
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
