"""Tab route — id parsing, flat serialization, and upstream error masking."""

import httpx
import pytest

from tabrelay.core.errors import (
    UpstreamDecodeError, UpstreamStatusError, UpstreamTransportError,
)
from tabrelay.schemas.tab import TabDetail


@pytest.mark.parametrize("raw_id", ["abc", "12.5", "", "1e3", "0x1F", "12abc", "1/2"])
async def test_non_integer_id_returns_400(client, fake_upstream, raw_id):
    res = await client.get(f"/tab/{raw_id}")
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid tab ID"}
    assert fake_upstream.calls == []


async def test_tab_returned_flat(client, fake_upstream):
    fake_upstream.tab_result = TabDetail(
        id=42, song_title="Wonderwall", artist_name="Oasis",
        content="[Verse]\nEm7  G", category="Chords",
    )

    res = await client.get("/tab/42")

    assert res.status_code == 200
    assert res.json() == {
        "id": 42,
        "song_name": "Wonderwall",
        "artist_name": "Oasis",
        "content": "[Verse]\nEm7  G",
        "type": "Chords",
    }
    assert fake_upstream.calls == [("fetch_tab", 42)]


@pytest.mark.parametrize("raw_id, parsed", [("007", 7), ("-5", -5), ("+9", 9)])
async def test_signed_and_padded_ids_are_parsed(client, fake_upstream, raw_id, parsed):
    fake_upstream.tab_result = TabDetail(id=parsed)
    res = await client.get(f"/tab/{raw_id}")
    assert res.status_code == 200
    assert fake_upstream.calls == [("fetch_tab", parsed)]


@pytest.mark.parametrize("error", [
    UpstreamStatusError(404, "tab 42 not found in upstream db"),
    UpstreamTransportError(
        "https://upstream.test/api/v1/tab/42",
        httpx.ReadTimeout("upstream read timed out"),
        timed_out=True,
    ),
    UpstreamDecodeError("upstream returned html"),
])
async def test_upstream_failure_returns_generic_500(client, fake_upstream, error):
    fake_upstream.tab_result = error

    res = await client.get("/tab/42")

    assert res.status_code == 500
    assert res.json() == {"error": "Failed to fetch tab"}
    assert "upstream" not in res.text


async def test_upstream_failure_logged_at_error_once(client, fake_upstream, caplog):
    fake_upstream.tab_result = UpstreamDecodeError("Expecting value")

    with caplog.at_level("DEBUG", logger="tabrelay"):
        await client.get("/tab/42")

    errors = [r for r in caplog.records if r.levelname == "ERROR"]
    assert len(errors) == 1
    assert errors[0].tab_id == 42
