"""Tab Schemas — value types shared by the upstream adapter and the HTTP gateway.

Invariants:
    - Upstream and local contracts use the same field names, so one model decodes
      the upstream body and serializes the response (by alias)
    - Absent or null upstream fields fall back to the zero value (0 / "")
    - A field of the wrong JSON type fails validation: no "123" -> 123, no 12.0 or true
      as an id, no id outside the signed 64-bit range
    - SearchResponse.results keeps upstream order

Design Decisions:
    - model_validator(mode="before") drops nulls instead of marking fields Optional:
      the public contract never emits null for these fields
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, model_validator

_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class SearchResultItem(_WireModel):
    """One search hit."""
    id: StrictInt = Field(0, ge=_INT64_MIN, le=_INT64_MAX)
    song_title: StrictStr = Field("", alias="song_name")
    artist_name: StrictStr = ""
    category: StrictStr = Field("", alias="type")


class TabDetail(_WireModel):
    """A single tab with its body text."""
    id: StrictInt = Field(0, ge=_INT64_MIN, le=_INT64_MAX)
    song_title: StrictStr = Field("", alias="song_name")
    artist_name: StrictStr = ""
    content: StrictStr = ""
    category: StrictStr = Field("", alias="type")


class SearchResponse(_WireModel):
    """Envelope for search results, upstream and local."""
    results: list[SearchResultItem] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorPayload(BaseModel):
    """Public error body: {"error": "<message>"}."""
    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(alias="error")


class TabUrlInfo(BaseModel):
    """Song metadata recovered from a tab page URL."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    artist: str
    song_name: str
    tab_type: str = Field(alias="type")
    tab_id: int | None = None
