"""Video store interface and in-memory implementation."""

import logging
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from devbytes.core.live_data import LiveData, MutableLiveData

from .models import DatabaseVideo

logger = logging.getLogger(__name__)


@runtime_checkable
class VideoStore(Protocol):
    """Local cache of videos.

    Implementations publish a fresh snapshot through the live query after
    every committed write.
    """

    def get_live_videos(self) -> LiveData[list[DatabaseVideo]]:
        """Live snapshot of all cached videos."""
        ...

    async def insert_all(self, records: Iterable[DatabaseVideo]) -> None:
        """Insert or overwrite records, keyed by URL."""
        ...


class InMemoryVideoStore:
    """Video store kept in process memory.

    Records are listed in first-insertion order; overwriting a record keeps
    its position.
    """

    def __init__(self, records: Iterable[DatabaseVideo] = ()) -> None:
        self._records: dict[str, DatabaseVideo] = {}
        for record in records:
            self._records[record.url] = record
        self._live: MutableLiveData[list[DatabaseVideo]] = MutableLiveData(
            list(self._records.values())
        )

    def get_live_videos(self) -> LiveData[list[DatabaseVideo]]:
        return self._live

    async def insert_all(self, records: Iterable[DatabaseVideo]) -> None:
        records = list(records)
        for record in records:
            self._records[record.url] = record
        logger.debug("Upserted %d videos into memory store", len(records))
        self._live.post(list(self._records.values()))

    def __len__(self) -> int:
        return len(self._records)
