"""Repository for DevByte videos.

The repository mediates between the playlist API and the local video cache.
Callers observe ``videos`` for data and call ``refresh_videos`` to update the
cache; the new data reaches observers through the store's live query, with no
direct signalling between the fetch and the display.
"""

import asyncio
import logging

from devbytes.core.live_data import LiveData
from devbytes.core.logging_config import log_refresh_event
from devbytes.core.models import Video
from devbytes.database.models import as_domain_model
from devbytes.database.store import VideoStore
from devbytes.network.client import DevByteService
from devbytes.network.schemas import as_database_model

logger = logging.getLogger(__name__)


class VideosRepository:
    """Fetch DevByte videos from the network and keep them in the local cache.

    Overlapping refreshes are not coordinated: each one upserts what it
    fetched and the store keeps whichever write lands last.
    """

    def __init__(self, store: VideoStore, service: DevByteService) -> None:
        """Initialize the repository.

        Args:
            store: Local video cache
            service: Remote playlist source
        """
        self.store = store
        self.service = service
        self._videos: LiveData[list[Video]] = store.get_live_videos().map(as_domain_model)

    @property
    def videos(self) -> LiveData[list[Video]]:
        """Playlist of cached videos, ready to display."""
        return self._videos

    async def refresh_videos(self) -> None:
        """Refresh the videos stored in the offline cache.

        Fetches the playlist, converts every entry to a cache record and
        upserts them all in one call. Observe ``videos`` to see the result.

        Raises:
            TransportError: If fetching the playlist failed
            StorageError: If writing to the cache failed
        """
        log_refresh_event(logger, "started")
        try:
            playlist = await self.service.fetch_playlist()
            records = as_database_model(playlist)
            await self.store.insert_all(records)
        except Exception as e:
            log_refresh_event(logger, "failed", error=str(e))
            raise

        log_refresh_event(logger, "completed", videos_fetched=len(records))

    refresh = refresh_videos

    def launch_refresh(self) -> "asyncio.Task[None]":
        """Start ``refresh_videos`` in the background.

        Must be called from a running event loop. Await the returned task to
        get the outcome; its exception is otherwise only logged.

        Returns:
            The scheduled task
        """
        task = asyncio.get_running_loop().create_task(self.refresh_videos())
        task.add_done_callback(_log_unretrieved_failure)
        return task


def _log_unretrieved_failure(task: "asyncio.Task[None]") -> None:
    if task.cancelled():
        logger.debug("Background video refresh cancelled")
        return
    if task.exception() is not None:
        logger.debug("Background video refresh finished with an error")
