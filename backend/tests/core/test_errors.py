"""Error hierarchy — public envelope and internal detail separation."""

import httpx

from tabrelay.core.errors import (
    ErrorCategory,
    MissingQueryParameterError,
    SearchFailedError,
    TabFetchFailedError,
    TabRelayError,
    UpstreamDecodeError,
    UpstreamError,
    UpstreamStatusError,
    UpstreamTransportError,
)


def test_envelope_is_flat_error_message():
    assert MissingQueryParameterError("q").to_response() == {
        "error": "Missing query parameter 'q'",
    }


def test_gateway_errors_have_fixed_messages():
    assert SearchFailedError().to_response() == {
        "error": "Failed to search Ultimate Guitar",
    }
    assert TabFetchFailedError().to_response() == {"error": "Failed to fetch tab"}
    assert SearchFailedError().http_status == 500
    assert TabFetchFailedError().http_status == 500


def test_status_error_embeds_status_and_body():
    err = UpstreamStatusError(403, "<html>Forbidden</html>")
    assert err.message == "API returned status 403: <html>Forbidden</html>"
    assert err.status_code == 403
    assert err.body == "<html>Forbidden</html>"


def test_transport_error_distinguishes_timeouts():
    cause = httpx.ConnectError("refused")
    err = UpstreamTransportError("https://u.test/x", cause)
    assert err.code == "UPSTREAM_TRANSPORT_ERROR"
    assert err.category is ErrorCategory.EXTERNAL_API
    assert err.cause is cause

    timeout = UpstreamTransportError(
        "https://u.test/x", httpx.ReadTimeout("slow"), timed_out=True,
    )
    assert timeout.code == "UPSTREAM_TIMEOUT"
    assert timeout.category is ErrorCategory.TIMEOUT


def test_upstream_errors_share_base():
    for err in (
        UpstreamStatusError(500, ""),
        UpstreamDecodeError("bad"),
        UpstreamTransportError("u", OSError("x")),
    ):
        assert isinstance(err, UpstreamError)
        assert isinstance(err, TabRelayError)
