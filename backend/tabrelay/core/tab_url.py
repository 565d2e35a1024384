"""Tab URL Parsing — derive artist, song and tab type from an Ultimate Guitar page URL.

Invariants:
    - Pure function: no IO, never touches the network
    - Host must contain "ultimate-guitar.com"; path must contain /tab/<artist>/<song>
    - A trailing all-digit song slug part is the tab id, never part of the title
    - Type defaults to "Chords" when the slug carries no recognised type keyword

Design Decisions:
    - Returns None for anything unparsable; the route decides the HTTP shape
    - Words are capitalised one by one (first letter upper, rest lower), so
      "oasis" -> "Oasis" and "AC-DC" -> "Ac Dc"
"""

import re
from dataclasses import dataclass
from urllib.parse import urlparse

_HOST_MARKER = "ultimate-guitar.com"
_PATH_PATTERN = re.compile(r"/tab/([^/]+)/([^/]+)")
_DEFAULT_TYPE = "Chords"
_TYPE_KEYWORDS = frozenset({
    "chords", "tab", "tabs", "ukulele", "bass", "power",
    "guitar-pro", "pro", "video", "official", "drums",
})
_TYPE_RENAMES = {"Tabs": "Tab", "Guitar-pro": "Pro"}


@dataclass(frozen=True)
class TabUrlParts:
    """Song metadata recovered from a tab page URL."""
    artist: str
    song_name: str
    tab_type: str
    tab_id: int | None = None


def _title_word(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _split_type(parts: list[str]) -> tuple[list[str], str]:
    """Strip a trailing type keyword. Needs at least one part left for the title."""
    if len(parts) > 1 and parts[-1].lower() in _TYPE_KEYWORDS:
        tab_type = _title_word(parts[-1])
        return parts[:-1], _TYPE_RENAMES.get(tab_type, tab_type)
    return parts, _DEFAULT_TYPE


def parse_tab_url(url: str) -> TabUrlParts | None:
    """Parse /tab/<artist-slug>/<song-slug>[-<type>][-<id>] into its parts."""
    try:
        parsed = urlparse(url.strip())
        hostname = parsed.hostname
    except ValueError:
        return None
    if not parsed.scheme or not hostname or _HOST_MARKER not in hostname:
        return None

    match = _PATH_PATTERN.search(parsed.path)
    if not match:
        return None
    artist_slug, song_slug = match.groups()

    artist = " ".join(
        _title_word(w) for w in re.split(r"[-_]", artist_slug)
    )

    parts = song_slug.split("-")
    tab_id = None
    if parts and parts[-1].isascii() and parts[-1].isdigit():
        tab_id = int(parts[-1])
        parts = parts[:-1]

    parts, tab_type = _split_type(parts)
    song_name = " ".join(_title_word(p) for p in parts)

    return TabUrlParts(
        artist=artist, song_name=song_name, tab_type=tab_type, tab_id=tab_id,
    )
