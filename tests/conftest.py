"""Shared test fixtures."""

import httpx
import pytest

from onenote_api.api.endpoints import OneNoteApi
from onenote_api.config import Settings
from onenote_api.transport.httpx_transport import HttpxTransport


@pytest.fixture
def settings() -> Settings:
    """Default settings, isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def make_api(settings: Settings):
    """Build a OneNoteApi whose HTTP traffic goes to ``handler``."""

    def _make(handler, **kwargs) -> OneNoteApi:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return OneNoteApi(
            "Bearer test-token",
            transport=HttpxTransport(client),
            settings=settings,
            **kwargs,
        )

    return _make


def _split_multipart(body: bytes, boundary: str) -> list[tuple[dict[str, str], bytes]]:
    """Minimal reference parser: split a body into (headers, content) pairs."""
    parts = []
    for segment in body.split(b"--" + boundary.encode())[1:]:
        if segment.startswith(b"--"):
            break
        head, _, content = segment[2:].partition(b"\r\n\r\n")
        headers = dict(line.split(": ", 1) for line in head.decode().split("\r\n"))
        parts.append((headers, content[:-2]))
    return parts


@pytest.fixture
def split_multipart():
    return _split_multipart
