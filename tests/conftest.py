"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Secrets are injected through the environment so tests never depend on a
local config/.env. HTTP is served by httpx.MockTransport; no test touches
the network.
"""

import json
from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest

from moodlog.core.config import get_app_config, get_settings
from moodlog.core.logging import setup_logging

TEST_TOKEN = "test_token"
TEST_DATABASE_ID = "test_database_id"


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def _configure_logging() -> None:
    """Route structlog through stdlib logging at WARNING so debug records stay quiet."""
    setup_logging(level="WARNING", enable_file_logging=False)


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def notion_env(monkeypatch: pytest.MonkeyPatch) -> Generator[dict[str, str], None, None]:
    """
    Provide Notion secrets via environment variables.

    Caches are cleared on both sides so each test sees its own environment.
    """
    monkeypatch.setenv("NOTION_TOKEN", TEST_TOKEN)
    monkeypatch.setenv("NOTION_DATABASE_ID", TEST_DATABASE_ID)
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield {"token": TEST_TOKEN, "database_id": TEST_DATABASE_ID}
    get_settings.cache_clear()
    get_app_config.cache_clear()


# =============================================================================
# HTTP Mock Fixtures
# =============================================================================


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, status_code: int, body: Any = None, text: str | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = body
        self.text = text
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict[str, Any]:
        return json.loads(self.last_request.content.decode("utf-8"))


@pytest.fixture
def mock_transport() -> Callable[..., RecordingTransport]:
    """
    Factory for recording mock transports.

    Usage:
        def test_create(mock_transport):
            transport = mock_transport(200, {"id": "page-1"})
            transport = mock_transport(500, text="Internal Server Error")
    """
    return RecordingTransport
