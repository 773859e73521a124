"""Client for the DevBytes playlist API."""

import logging

import httpx
from pydantic import ValidationError

from devbytes.core.exceptions import TransportError

from .schemas import NetworkVideoContainer

logger = logging.getLogger(__name__)

PLAYLIST_PATH = "devbytes"


class DevByteService:
    """Remote source for the DevBytes playlist.

    The HTTP client is passed in rather than looked up globally, so the
    caller controls its lifetime, base URL and timeout.

    Usage:
        async with create_client(base_url=settings.devbytes_base_url) as http:
            service = DevByteService(http)
            playlist = await service.fetch_playlist()
    """

    def __init__(self, client: httpx.AsyncClient, path: str = PLAYLIST_PATH) -> None:
        """Initialize the service.

        Args:
            client: HTTP client with the API base URL configured
            path: Playlist endpoint path relative to the base URL
        """
        self.client = client
        self.path = path

    async def fetch_playlist(self) -> NetworkVideoContainer:
        """Fetch the current playlist.

        Returns:
            Parsed playlist

        Raises:
            TransportError: If the request fails, times out, returns an error
                status or a body that is not a valid playlist
        """
        logger.debug("Fetching playlist from %s", self.path)

        try:
            response = await self.client.get(self.path)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"Playlist request failed with status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Playlist request failed: {e}") from e

        try:
            playlist = NetworkVideoContainer.model_validate_json(response.content)
        except ValidationError as e:
            raise TransportError(f"Malformed playlist response: {e}") from e

        logger.debug("Fetched %d videos", len(playlist.videos))
        return playlist
