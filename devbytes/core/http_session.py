"""HTTP client construction for the DevBytes API."""

from typing import Any

import httpx

DEFAULT_HEADERS = {
    "User-Agent": "devbytes-cache/0.1",
    "Accept": "application/json",
}


def create_client(
    base_url: str = "",
    timeout: float = 30.0,
    **kwargs: Any,
) -> httpx.AsyncClient:
    """
    Create an async HTTP client with the project's default headers.

    The caller owns the returned client and must close it, usually with
    ``async with``. No retry transport is mounted: a failed request is
    reported to the caller as-is.

    Args:
        base_url: Base URL that relative request paths resolve against
        timeout: Request timeout in seconds
        **kwargs: Additional arguments passed to httpx.AsyncClient

    Returns:
        Configured httpx.AsyncClient instance
    """
    headers = {**DEFAULT_HEADERS, **kwargs.pop("headers", {})}
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=timeout,
        headers=headers,
        follow_redirects=True,
        **kwargs,
    )
