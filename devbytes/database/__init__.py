"""Local cache of DevByte videos.

Usage:
    # Context manager (recommended)
    async with MongoVideoStore() as store:
        await store.insert_all(records)

    # In-memory cache, nothing persisted
    store = InMemoryVideoStore()
"""

from devbytes.database.manager import MongoVideoStore, get_video_store_context
from devbytes.database.models import DatabaseVideo, as_domain_model
from devbytes.database.store import InMemoryVideoStore, VideoStore

__all__ = [
    "DatabaseVideo",
    "InMemoryVideoStore",
    "MongoVideoStore",
    "VideoStore",
    "as_domain_model",
    "get_video_store_context",
]
