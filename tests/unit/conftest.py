"""
Pytest configuration and shared fixtures for unit tests.
"""

import json
from dataclasses import dataclass, field
from typing import Callable, Optional

import httpx
import pytest

from botman_client.botman import BotmanClient
from botman_client.config import clear_settings_cache
from botman_client.session import Session

TEST_BASE_URL = "https://akab-test.luna.akamaiapis.net"

INTERNAL_ERROR_BODY = json.dumps(
    {
        "type": "internal_error",
        "title": "Internal Server Error",
        "detail": "Error fetching data",
        "status": 500,
    }
)


class TrackingStream(httpx.SyncByteStream):
    """Response body that records whether it was closed."""

    def __init__(self, body: bytes):
        self.body = body
        self.closed = False

    def __iter__(self):
        yield self.body

    def close(self) -> None:
        self.closed = True


@dataclass
class MockAPI:
    """A BotmanClient wired to an in-memory transport."""

    client: BotmanClient
    requests: list[httpx.Request] = field(default_factory=list)
    streams: list[TrackingStream] = field(default_factory=list)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def mock_api() -> Callable[..., MockAPI]:
    """
    Factory building a client whose transport answers with a fixed response.

    Usage:
        api = mock_api(status=200, body='{"a": 1}')
        api.client.get_bot_analytics_cookie_values()
        assert api.last_request.method == "GET"
    """
    created: list[httpx.Client] = []

    def factory(
        status: int = 200,
        body: str = "{}",
        handler: Optional[Callable[[httpx.Request], httpx.Response]] = None,
        **session_kwargs,
    ) -> MockAPI:
        api_requests: list[httpx.Request] = []
        streams: list[TrackingStream] = []

        def default_handler(request: httpx.Request) -> httpx.Response:
            stream = TrackingStream(body.encode("utf-8"))
            streams.append(stream)
            return httpx.Response(
                status,
                headers={"Content-Type": "application/json"},
                stream=stream,
            )

        def recording_handler(request: httpx.Request) -> httpx.Response:
            request.read()
            api_requests.append(request)
            return (handler or default_handler)(request)

        http_client = httpx.Client(
            base_url=TEST_BASE_URL,
            transport=httpx.MockTransport(recording_handler),
        )
        created.append(http_client)

        session = Session(client=http_client, **session_kwargs)
        return MockAPI(
            client=BotmanClient(session), requests=api_requests, streams=streams
        )

    yield factory

    for http_client in created:
        http_client.close()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove AKAMAI_* variables and the settings cache for the test."""
    import os

    for key in list(os.environ):
        if key.startswith("AKAMAI"):
            monkeypatch.delenv(key, raising=False)
    clear_settings_cache()
    yield monkeypatch
    clear_settings_cache()
