"""Error Hierarchy — typed, categorized exceptions for every TabRelay failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors are 400-level; upstream and gateway failures are 500-level
    - to_response() produces the public envelope {"error": message}
    - Upstream errors carry full detail for logs; their messages never reach callers

Design Decisions:
    - Single hierarchy with TabRelayError base: one FastAPI handler catches all
    - Upstream failures split by kind (transport / status / decode) for observability,
      then collapsed into one route-level error for the public response
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    EXTERNAL_API = "external_api"
    TIMEOUT = "timeout"


class TabRelayError(Exception):
    """Base exception for all TabRelay errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the public error envelope."""
        return {"error": self.message}


# ─── Validation Errors (400-level) ──────────────────────────────

class MissingQueryParameterError(TabRelayError):
    """Required query parameter absent or empty."""
    def __init__(self, parameter: str):
        super().__init__(
            f"Missing query parameter '{parameter}'",
            "MISSING_QUERY_PARAMETER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.parameter = parameter


class InvalidTabIdError(TabRelayError):
    """Tab id path segment is not a base-10 integer."""
    def __init__(self, raw_id: str):
        super().__init__(
            "Invalid tab ID", "INVALID_TAB_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.raw_id = raw_id


class UnparsableTabUrlError(TabRelayError):
    """Tab page URL does not follow the /tab/<artist>/<song> layout."""
    def __init__(self, url: str):
        super().__init__(
            "Could not parse song information from URL",
            "UNPARSABLE_TAB_URL", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.url = url


# ─── Upstream Errors (internal, logged only) ────────────────────

class UpstreamError(TabRelayError):
    """Outbound call to the tab-hosting service failed."""
    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory = ErrorCategory.EXTERNAL_API,
    ):
        super().__init__(
            message, code, category, ErrorSeverity.ERROR, 502,
        )


class UpstreamTransportError(UpstreamError):
    """Connection, DNS, TLS or timeout failure before a response arrived."""
    def __init__(self, url: str, cause: Exception, timed_out: bool = False):
        super().__init__(
            f"GET {url} failed: {type(cause).__name__}: {cause}",
            "UPSTREAM_TIMEOUT" if timed_out else "UPSTREAM_TRANSPORT_ERROR",
            ErrorCategory.TIMEOUT if timed_out else ErrorCategory.EXTERNAL_API,
        )
        self.url = url
        self.cause = cause
        self.timed_out = timed_out


class UpstreamStatusError(UpstreamError):
    """Upstream answered with a status other than 200."""
    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"API returned status {status_code}: {body}",
            "UPSTREAM_BAD_STATUS",
        )
        self.status_code = status_code
        self.body = body


class UpstreamDecodeError(UpstreamError):
    """Upstream body is not the JSON shape we expect."""
    def __init__(self, detail: str):
        super().__init__(
            f"Could not decode upstream response: {detail}",
            "UPSTREAM_DECODE_ERROR",
        )
        self.detail = detail


# ─── Gateway Errors (500-level, public) ─────────────────────────

class SearchFailedError(TabRelayError):
    """Search could not be served; cause logged, not exposed."""
    def __init__(self):
        super().__init__(
            "Failed to search Ultimate Guitar", "SEARCH_FAILED",
            ErrorCategory.EXTERNAL_API, ErrorSeverity.ERROR, 500,
        )


class TabFetchFailedError(TabRelayError):
    """Tab could not be fetched; cause logged, not exposed."""
    def __init__(self):
        super().__init__(
            "Failed to fetch tab", "TAB_FETCH_FAILED",
            ErrorCategory.EXTERNAL_API, ErrorSeverity.ERROR, 500,
        )
