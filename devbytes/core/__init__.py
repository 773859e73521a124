"""Core package for the DevBytes video cache."""

from devbytes.core.config import Settings, get_settings, get_settings_with_yaml
from devbytes.core.exceptions import DevBytesError, StorageError, TransportError
from devbytes.core.http_session import create_client
from devbytes.core.live_data import LiveData, MutableLiveData
from devbytes.core.logging_config import get_logger, log_refresh_event, setup_logging
from devbytes.core.models import Video, smart_truncate

__all__ = [
    "Settings",
    "get_settings",
    "get_settings_with_yaml",
    # Errors
    "DevBytesError",
    "StorageError",
    "TransportError",
    # Observables
    "LiveData",
    "MutableLiveData",
    # Logging
    "setup_logging",
    "get_logger",
    "log_refresh_event",
    # HTTP
    "create_client",
    # Models
    "Video",
    "smart_truncate",
]
