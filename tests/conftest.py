"""Pytest fixtures and configuration.

This module provides:
- Sample playlist payloads
- Mock HTTP transports for the playlist API
- Fake stores for failure cases
"""

import json
from collections.abc import AsyncGenerator, Callable, Iterable
from typing import Any

import httpx
import pytest
import pytest_asyncio

from devbytes.core.exceptions import StorageError
from devbytes.database import DatabaseVideo, InMemoryVideoStore
from devbytes.network import DevByteService

BASE_URL = "https://devbytes.test"


# =============================================================================
# Sample Data
# =============================================================================


def make_network_video(title: str, url: str, **overrides: Any) -> dict[str, Any]:
    """Build a playlist entry as the API returns it."""
    video = {
        "title": title,
        "description": f"{title} description",
        "url": url,
        "updated": "2018-06-07T17:09:43+00:00",
        "thumbnail": f"{url}/thumb.jpg",
        "closedCaptions": None,
    }
    video.update(overrides)
    return video


@pytest.fixture
def playlist_payload() -> dict[str, Any]:
    """Two-video playlist payload."""
    return {
        "videos": [
            make_network_video("A", "u1"),
            make_network_video("B", "u2"),
        ]
    }


@pytest.fixture
def cached_record() -> DatabaseVideo:
    """Record persisted before the test starts."""
    return DatabaseVideo(
        url="u0",
        updated="2018-01-01T00:00:00+00:00",
        title="Old",
        description="Cached earlier",
        thumbnail="u0/thumb.jpg",
    )


# =============================================================================
# HTTP Fixtures
# =============================================================================


def json_handler(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    """Handler answering every request with the given JSON payload."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(payload).encode())

    return handler


ServiceFactory = Callable[[Callable[[httpx.Request], httpx.Response]], DevByteService]


def connection_refused(request: httpx.Request) -> httpx.Response:
    """Handler simulating a server that cannot be reached."""
    raise httpx.ConnectError("connection refused", request=request)


@pytest_asyncio.fixture
async def make_service() -> AsyncGenerator[ServiceFactory, None]:
    """Factory for services whose HTTP client is served by a handler.

    Yields:
        Callable taking a request handler and returning a DevByteService;
        every client it creates is closed after the test
    """
    clients: list[httpx.AsyncClient] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> DevByteService:
        client = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
        clients.append(client)
        return DevByteService(client)

    try:
        yield factory
    finally:
        for client in clients:
            await client.aclose()


@pytest.fixture
def service(make_service: ServiceFactory, playlist_payload: dict[str, Any]) -> DevByteService:
    """Service returning the sample playlist."""
    return make_service(json_handler(playlist_payload))


@pytest.fixture
def failing_service(make_service: ServiceFactory) -> DevByteService:
    """Service whose requests never reach the server."""
    return make_service(connection_refused)


# =============================================================================
# Store Fixtures
# =============================================================================


class FailingVideoStore(InMemoryVideoStore):
    """In-memory store whose writes always fail."""

    def __init__(self, records: Iterable[DatabaseVideo] = ()) -> None:
        super().__init__(records)
        self.attempts = 0

    async def insert_all(self, records: Iterable[DatabaseVideo]) -> None:
        self.attempts += 1
        raise StorageError("disk full")


@pytest.fixture
def store() -> InMemoryVideoStore:
    """Empty in-memory store."""
    return InMemoryVideoStore()
