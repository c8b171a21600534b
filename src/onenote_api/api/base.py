"""Request executor for the OneNote API.

Builds the full URL and headers for one call, sends it through the transport
exactly once, and classifies the outcome. Failures come back as RequestError
values rather than exceptions.
"""

import json
import logging
from collections.abc import Collection, Iterator
from contextlib import contextmanager
from urllib.parse import urlencode

from onenote_api.config import Settings, get_settings
from onenote_api.models.errors import RequestError, ResponsePackage
from onenote_api.multipart import MultipartBody
from onenote_api.transport.errors import classify_outcome
from onenote_api.transport.httpx_transport import HttpxTransport

logger = logging.getLogger(__name__)

RequestData = str | bytes | MultipartBody


class OneNoteApiBase:
    """Communication layer shared by all endpoint calls."""

    def __init__(
        self,
        auth_header: str,
        timeout_ms: int | None = None,
        headers: dict[str, str] | None = None,
        api_host_version_override: str | None = None,
        query_params: dict[str, str] | None = None,
        transport: HttpxTransport | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.auth_header = auth_header
        self.timeout_ms = timeout_ms if timeout_ms is not None else settings.onenote_timeout_ms
        self.headers = dict(headers or {})
        self.api_host_version_override = api_host_version_override
        self.query_params = dict(query_params or {})
        self.use_beta_api = False
        self._api_root = settings.onenote_api_root.rstrip("/")
        self._api_version = settings.onenote_api_version
        self._beta_version = settings.onenote_beta_version
        self._transport = transport or HttpxTransport()

    @contextmanager
    def beta_api(self) -> Iterator[None]:
        """Route calls made inside the block to the beta endpoints.

        The previous flag value is restored on exit, including on error. The
        flag is shared by every call on this instance; for a single call pass
        ``beta=True`` to request() instead.
        """
        previous = self.use_beta_api
        self.use_beta_api = True
        try:
            yield
        finally:
            self.use_beta_api = previous

    def generate_full_base_url(self, partial_url: str, beta: bool = False) -> str:
        if self.api_host_version_override:
            version = self.api_host_version_override
        elif beta or self.use_beta_api:
            version = self._beta_version
        else:
            version = self._api_version
        return f"{self._api_root}/{version}/me/notes{partial_url}"

    def generate_full_url(
        self, partial_url: str, is_full_url: bool = False, beta: bool = False
    ) -> str:
        """Absolute URL for ``partial_url`` with the instance query params appended."""
        url = partial_url if is_full_url else self.generate_full_base_url(partial_url, beta)
        if self.query_params:
            separator = "&" if "?" in url else "?"
            url = f"{url}{separator}{urlencode(self.query_params)}"
        return url

    async def request(
        self,
        partial_url: str,
        data: RequestData | None = None,
        content_type: str | None = None,
        http_method: str | None = None,
        is_full_url: bool = False,
        expected_codes: Collection[int] | None = None,
        parse_json: bool = True,
        beta: bool = False,
    ) -> ResponsePackage | RequestError:
        """Send one request and return the parsed response or a RequestError.

        The method defaults to POST when ``data`` is given, GET otherwise. A
        MultipartBody supplies its own Content-Type; other bodies default to
        ``application/json``. With ``parse_json=False`` the success body is
        returned as text (page HTML, batch responses). ``beta=True`` targets the
        beta endpoints for this call only, without touching ``use_beta_api``.
        """
        method = (http_method or ("POST" if data is not None else "GET")).upper()
        url = self.generate_full_url(partial_url, is_full_url, beta)

        body: bytes | None = None
        if isinstance(data, MultipartBody):
            body = data.body
            content_type = content_type or data.content_type
        elif isinstance(data, str):
            body = data.encode("utf-8")
        else:
            body = data

        headers = {"Authorization": self.auth_header}
        if body is not None:
            headers["Content-Type"] = content_type or "application/json"
        headers.update(self.headers)

        outcome = await self._transport.send(url, method, headers, body, self.timeout_ms)
        result = classify_outcome(
            outcome, self.timeout_ms, expected_codes, json.loads if parse_json else str
        )

        if isinstance(result, RequestError):
            logger.warning(
                "OneNote request failed: %s %s -> %s",
                method,
                url,
                result.error.value,
                extra={"status_code": result.status_code, "error_type": result.error.value},
            )
        else:
            logger.debug("OneNote request succeeded: %s %s -> %d", method, url, result.status_code)
        return result
