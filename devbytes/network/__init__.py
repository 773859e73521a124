"""Network access to the DevBytes playlist API."""

from devbytes.network.client import DevByteService
from devbytes.network.schemas import NetworkVideo, NetworkVideoContainer, as_database_model

__all__ = [
    "DevByteService",
    "NetworkVideo",
    "NetworkVideoContainer",
    "as_database_model",
]
