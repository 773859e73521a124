"""Tests for the playlist API client."""

import httpx
import pytest

from devbytes.core.exceptions import TransportError
from devbytes.core.http_session import DEFAULT_HEADERS, create_client
from devbytes.network import DevByteService

from tests.conftest import BASE_URL, json_handler


class TestFetchPlaylist:
    """Test DevByteService.fetch_playlist."""

    @pytest.mark.asyncio
    async def test_fetch_playlist(self, service):
        """A valid response is parsed into a playlist."""
        playlist = await service.fetch_playlist()

        assert [v.title for v in playlist.videos] == ["A", "B"]
        assert playlist.videos[1].url == "u2"

    @pytest.mark.asyncio
    async def test_requests_playlist_endpoint(self, make_service, playlist_payload):
        """The playlist is fetched from the devbytes path of the base URL."""
        requested = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(str(request.url))
            return json_handler(playlist_payload)(request)

        await make_service(handler).fetch_playlist()

        assert requested == [f"{BASE_URL}/devbytes"]

    @pytest.mark.asyncio
    async def test_error_status_raises_transport_error(self, make_service):
        """A non-2xx status is reported as a transport failure."""
        service = make_service(json_handler({"error": "nope"}, status_code=503))

        with pytest.raises(TransportError, match="503"):
            await service.fetch_playlist()

    @pytest.mark.asyncio
    async def test_connection_error_raises_transport_error(self, failing_service):
        """Connectivity failures keep the original error as the cause."""
        with pytest.raises(TransportError) as exc_info:
            await failing_service.fetch_playlist()

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_timeout_raises_transport_error(self, make_service):
        """Timeouts are transport failures."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(TransportError):
            await make_service(handler).fetch_playlist()

    @pytest.mark.asyncio
    async def test_malformed_body_raises_transport_error(self, make_service):
        """A body that is not a playlist is rejected."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>not json</html>")

        with pytest.raises(TransportError, match="Malformed"):
            await make_service(handler).fetch_playlist()

    @pytest.mark.asyncio
    async def test_missing_fields_raise_transport_error(self, make_service):
        """Entries without required fields are rejected as a whole."""
        service = make_service(json_handler({"videos": [{"title": "A"}]}))

        with pytest.raises(TransportError):
            await service.fetch_playlist()


class TestCreateClient:
    """Test HTTP client construction."""

    @pytest.mark.asyncio
    async def test_client_defaults(self):
        """Clients carry the base URL, timeout and default headers."""
        async with create_client(base_url=BASE_URL, timeout=5.0) as client:
            assert str(client.base_url).rstrip("/") == BASE_URL
            assert client.timeout.read == 5.0
            assert client.headers["User-Agent"] == DEFAULT_HEADERS["User-Agent"]

    @pytest.mark.asyncio
    async def test_extra_headers_merged(self):
        """Caller headers are added to the defaults."""
        async with create_client(headers={"X-Test": "1"}) as client:
            assert client.headers["X-Test"] == "1"
            assert client.headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_service_uses_injected_client(self, playlist_payload):
        """The service works with a client built by create_client."""
        transport = httpx.MockTransport(json_handler(playlist_payload))
        async with create_client(base_url=BASE_URL, transport=transport) as client:
            playlist = await DevByteService(client).fetch_playlist()

        assert len(playlist.videos) == 2


class TestPlaylistShape:
    """Test rejection of bodies that are not playlists."""

    @pytest.mark.asyncio
    async def test_body_without_videos_key_raises_transport_error(self, make_service):
        """A JSON object lacking the videos list is not an empty playlist."""
        service = make_service(json_handler({"items": [{"title": "A"}]}))

        with pytest.raises(TransportError, match="Malformed"):
            await service.fetch_playlist()

    @pytest.mark.asyncio
    async def test_empty_object_raises_transport_error(self, make_service):
        service = make_service(json_handler({}))

        with pytest.raises(TransportError):
            await service.fetch_playlist()
