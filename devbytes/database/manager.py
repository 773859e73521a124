"""MongoDB video store.

This module handles the MongoDB connection and the cached video collection.
"""

import logging
from collections.abc import AsyncGenerator, Iterable
from contextlib import asynccontextmanager
from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ASCENDING, ReplaceOne
from pymongo.errors import PyMongoError

from devbytes.core.config import Settings, get_settings
from devbytes.core.exceptions import StorageError
from devbytes.core.live_data import LiveData, MutableLiveData

from .models import DatabaseVideo

logger = logging.getLogger(__name__)


class MongoVideoStore:
    """Video cache backed by a MongoDB collection.

    This class provides:
    - Connection lifecycle management
    - A live snapshot of the collection, refreshed after every write
    - Bulk upsert of videos keyed by URL

    Usage:
        # Context manager (recommended)
        async with MongoVideoStore() as store:
            store.get_live_videos().observe(print)
            await store.insert_all(records)

        # Manual lifecycle management
        store = MongoVideoStore()
        try:
            await store.initialize()
            await store.insert_all(records)
        finally:
            await store.close()
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: AsyncIOMotorClient | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            settings: Settings to read connection details from
            client: Existing motor client to use instead of creating one
        """
        self.settings = settings or get_settings()
        self.client: AsyncIOMotorClient | None = client
        self.videos: AsyncIOMotorCollection | None = None
        self._owns_client = client is None
        self._live: MutableLiveData[list[DatabaseVideo]] = MutableLiveData()
        self._initialized = False

    async def initialize(self) -> None:
        """Open the connection and load the current cache contents.

        Raises:
            StorageError: If the collection cannot be read
        """
        if self._initialized:
            return

        if self.client is None:
            self.client = AsyncIOMotorClient(self.settings.mongodb_url)
        db = self.client[self.settings.mongodb_database]
        self.videos = db[self.settings.mongodb_collection]

        try:
            await self.init_indexes()
            await self._publish_snapshot()
        except PyMongoError as e:
            raise StorageError(f"Failed to load video cache: {e}") from e

        self._initialized = True

        logger.debug(
            "Video store ready (%s.%s)",
            self.settings.mongodb_database,
            self.settings.mongodb_collection,
        )

    async def close(self) -> None:
        """Close MongoDB connection."""
        if self.client and self._owns_client:
            self.client.close()
            self.client = None
        self._initialized = False

    async def __aenter__(self) -> "MongoVideoStore":
        """Async context manager entry."""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def init_indexes(self) -> None:
        """Initialize collection indexes."""
        await self.videos.create_index("url", unique=True)

    def get_live_videos(self) -> LiveData[list[DatabaseVideo]]:
        """Live snapshot of all cached videos, in insertion order.

        Holds no value until the store has been initialized.
        """
        return self._live

    async def insert_all(self, records: Iterable[DatabaseVideo]) -> None:
        """Insert or overwrite videos in a single bulk write.

        Args:
            records: Videos to store; an existing video with the same URL
                is replaced

        Raises:
            StorageError: If the bulk write or the snapshot reload fails
        """
        await self.initialize()
        operations = [
            ReplaceOne({"url": record.url}, record.model_dump_for_mongo(), upsert=True)
            for record in records
        ]

        try:
            # bulk_write rejects an empty batch
            if operations:
                result = await self.videos.bulk_write(operations, ordered=True)
                logger.debug(
                    "Upserted videos (new: %d, replaced: %d)",
                    result.upserted_count,
                    result.modified_count,
                )
        except PyMongoError as e:
            # Operations before the failing one stay committed
            await self._try_publish_snapshot()
            raise StorageError(f"Failed to save videos: {e}") from e

        try:
            await self._publish_snapshot()
        except PyMongoError as e:
            raise StorageError(f"Saved videos but failed to reload cache: {e}") from e

    async def count(self) -> int:
        """Number of cached videos."""
        await self.initialize()
        try:
            return await self.videos.count_documents({})
        except PyMongoError as e:
            raise StorageError(f"Failed to count videos: {e}") from e

    async def _publish_snapshot(self) -> None:
        cursor = self.videos.find({}).sort("_id", ASCENDING)
        records = [DatabaseVideo.from_mongo(doc) async for doc in cursor]
        self._live.post(records)

    async def _try_publish_snapshot(self) -> None:
        try:
            await self._publish_snapshot()
        except PyMongoError as e:
            logger.warning("Failed to reload video cache after write error: %s", e)


@asynccontextmanager
async def get_video_store_context(
    settings: Settings | None = None,
) -> AsyncGenerator[MongoVideoStore, None]:
    """Get a video store with proper lifecycle management.

    Usage:
        async with get_video_store_context() as store:
            await store.insert_all(records)

    Yields:
        MongoVideoStore instance with initialized connection
    """
    store = MongoVideoStore(settings)
    try:
        await store.initialize()
        yield store
    finally:
        await store.close()
