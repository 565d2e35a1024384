"""Tab ID Parsing — strict base-10 integer parsing for the /tab/{id} path segment.

Invariants:
    - Accepts an optional leading sign followed by ASCII digits only
    - Rejects whitespace, underscores, decimals, non-ASCII digits and empty input
    - Result fits in a signed 64-bit integer (upstream ids are int64)
"""

import re

from tabrelay.core.errors import InvalidTabIdError

_TAB_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


def parse_tab_id(raw: str) -> int:
    """Parse a tab id or raise InvalidTabIdError."""
    if not _TAB_ID_PATTERN.fullmatch(raw):
        raise InvalidTabIdError(raw)
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise InvalidTabIdError(raw)
    return value
