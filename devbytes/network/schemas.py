"""Pydantic schemas for the DevBytes playlist API."""

from pydantic import BaseModel, ConfigDict, Field

from devbytes.core.models import Video
from devbytes.database.models import DatabaseVideo


class NetworkVideo(BaseModel):
    """A video as described by the playlist API."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: str
    url: str
    updated: str
    thumbnail: str
    closed_captions: str | None = Field(default=None, alias="closedCaptions")


class NetworkVideoContainer(BaseModel):
    """Playlist payload returned by one fetch.

    The API wraps the list in an object:

        {"videos": [{"title": "...", "url": "...", ...}]}
    """

    videos: list[NetworkVideo]

    def as_database_model(self) -> list[DatabaseVideo]:
        """Convert every network video into a cache record."""
        return as_database_model(self)

    def as_domain_model(self) -> list[Video]:
        """Convert every network video into a domain video."""
        return [
            Video(
                title=video.title,
                description=video.description,
                url=video.url,
                updated=video.updated,
                thumbnail=video.thumbnail,
            )
            for video in self.videos
        ]


def as_database_model(container: NetworkVideoContainer) -> list[DatabaseVideo]:
    """Convert a playlist into records for the local cache.

    Args:
        container: Playlist fetched from the network

    Returns:
        One DatabaseVideo per network video, in playlist order
    """
    return [
        DatabaseVideo(
            url=video.url,
            updated=video.updated,
            title=video.title,
            description=video.description,
            thumbnail=video.thumbnail,
        )
        for video in container.videos
    ]
