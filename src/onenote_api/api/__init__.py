"""OneNote API request execution and endpoint wrappers."""

from onenote_api.api.base import OneNoteApiBase
from onenote_api.api.client import get_onenote_api, reset_client
from onenote_api.api.endpoints import OneNoteApi

__all__ = [
    "OneNoteApi",
    "OneNoteApiBase",
    "get_onenote_api",
    "reset_client",
]
