"""Root conftest — shared test configuration.

Invariants:
    - Settings built explicitly, never from a developer's .env file
    - No test reaches the real upstream service
"""

import pytest

from tabrelay.config import Settings


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        port=8080,
        upstream_base_url="https://upstream.test/api/v1/tab",
        upstream_timeout_seconds=5,
        log_level="DEBUG",
        log_format="text",
    )
