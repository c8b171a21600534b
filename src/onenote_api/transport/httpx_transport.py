"""Single-attempt HTTP transport over httpx.

Sends one request and reports what happened as a TransportOutcome. Never
retries and never raises for transport failures.
"""

import asyncio
import logging

import httpx

from onenote_api.models.errors import TransportOutcome

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Sends requests with httpx, optionally through a caller-owned AsyncClient.

    Without a client, each send opens and closes its own AsyncClient.
    """

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = client

    async def send(
        self,
        url: str,
        method: str,
        headers: dict[str, str],
        body: bytes | None,
        timeout_ms: int,
    ) -> TransportOutcome:
        """Perform one attempt bounded by ``timeout_ms`` of wall-clock time."""
        timeout_seconds = timeout_ms / 1000
        try:
            async with asyncio.timeout(timeout_seconds):
                response = await self._request(url, method, headers, body, timeout_seconds)
        except (TimeoutError, httpx.TimeoutException):
            logger.warning("%s %s timed out after %dms", method, url, timeout_ms)
            return TransportOutcome(completed=False, timed_out=True)
        except (httpx.HTTPError, OSError) as exc:
            logger.warning("%s %s failed without a response: %s", method, url, exc)
            return TransportOutcome(completed=False)

        return TransportOutcome(
            completed=True,
            status_code=response.status_code,
            response_body=response.text,
            raw_headers=_raw_header_block(response.headers),
        )

    async def _request(
        self,
        url: str,
        method: str,
        headers: dict[str, str],
        body: bytes | None,
        timeout_seconds: float,
    ) -> httpx.Response:
        if self._client is not None:
            return await self._client.request(
                method, url, headers=headers, content=body, timeout=timeout_seconds
            )
        async with httpx.AsyncClient(timeout=httpx.Timeout(timeout_seconds)) as client:
            return await client.request(method, url, headers=headers, content=body)


def _raw_header_block(headers: httpx.Headers) -> str:
    """Render response headers as a CRLF-delimited "Name: value" block.

    Uses the raw header list so names keep the case the server sent.
    """
    return "\r\n".join(
        f"{name.decode('latin-1')}: {value.decode('latin-1')}" for name, value in headers.raw
    )
