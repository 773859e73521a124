"""DevBytes video cache - fetch the playlist, keep it offline, observe it."""

from devbytes.repository import VideosRepository

__version__ = "0.1.0"
__all__ = ["VideosRepository"]
