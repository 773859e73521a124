"""Custom exceptions for the DevBytes video cache."""


class DevBytesError(Exception):
    """Base exception for DevBytes errors."""

    pass


class TransportError(DevBytesError):
    """Fetching the playlist from the network failed."""

    pass


class StorageError(DevBytesError):
    """Reading or writing the local video cache failed."""

    pass
