"""Database models for the video cache.

Cached videos are stored one document per video, keyed by URL. These models
validate documents on the way in and out of MongoDB.
"""

from typing import Any

from pydantic import BaseModel, Field

from devbytes.core.models import Video


class DatabaseVideo(BaseModel):
    """Cached video document."""

    url: str = Field(..., description="Video URL, unique key of the cache")
    updated: str = Field(..., description="Last update timestamp reported by the API")
    title: str = Field(..., description="Video title")
    description: str = Field(..., description="Video description")
    thumbnail: str = Field(..., description="Thumbnail image URL")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "url": "https://www.youtube.com/watch?v=sYGKUtM2ga8",
                "updated": "2018-06-07T17:09:43+00:00",
                "title": "Android Jetpack: EmojiCompat",
                "description": "With EmojiCompat, your app can display new emoji...",
                "thumbnail": "https://i4.ytimg.com/vi/sYGKUtM2ga8/hqdefault.jpg",
            }
        },
    }

    def model_dump_for_mongo(self) -> dict[str, Any]:
        """Convert to dict suitable for MongoDB storage."""
        return self.model_dump()

    @classmethod
    def from_mongo(cls, doc: dict[str, Any]) -> "DatabaseVideo":
        """Build a record from a MongoDB document, ignoring ``_id``."""
        return cls.model_validate({k: v for k, v in doc.items() if k != "_id"})

    def as_domain_model(self) -> Video:
        """Project this record into the domain model."""
        return Video(
            title=self.title,
            description=self.description,
            url=self.url,
            updated=self.updated,
            thumbnail=self.thumbnail,
        )


def as_domain_model(records: list[DatabaseVideo]) -> list[Video]:
    """Map cached records to domain videos, preserving order.

    Args:
        records: Snapshot of the cache

    Returns:
        One Video per record
    """
    return [record.as_domain_model() for record in records]
