"""Video repository mediating between the network and the local cache."""

from devbytes.repository.videos import VideosRepository

__all__ = ["VideosRepository"]
