"""Cached OneNoteApi singleton built from application settings.

Follows the lazy-init pattern: the client is created on first use so that
importing the package never reads the environment.
"""

from onenote_api.api.endpoints import OneNoteApi
from onenote_api.config import get_settings

_client: OneNoteApi | None = None


async def get_onenote_api() -> OneNoteApi:
    """Return a cached OneNoteApi instance.

    Creates the client on first call using onenote_auth_header and
    onenote_timeout_ms from settings. Subsequent calls return the cached
    instance.
    """
    global _client
    if _client is None:
        settings = get_settings()
        _client = OneNoteApi(
            auth_header=settings.onenote_auth_header,
            timeout_ms=settings.onenote_timeout_ms,
            settings=settings,
        )
    return _client


def reset_client() -> None:
    """Reset the cached client instance. Used for testing."""
    global _client
    _client = None
