"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Settings are built once at startup and passed explicitly into create_app()
    - get_settings() is cached (lru_cache): single default instance per process
    - upstream_timeout_seconds of 0 or empty means "no deadline" (None)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: the service runs with no environment at all
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tabrelay.infrastructure.upstream_client import (
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"  # nosec B104
    port: int = 8080

    # Upstream
    upstream_base_url: str = DEFAULT_BASE_URL
    upstream_user_agent: str = DEFAULT_USER_AGENT
    upstream_timeout_seconds: float | None = 30.0

    @field_validator("upstream_timeout_seconds", mode="before")
    @classmethod
    def disable_zero_timeout(cls, v):
        """0 or an empty string disables the outbound deadline."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        if float(v) <= 0:
            return None
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
