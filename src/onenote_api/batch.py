"""Batch request encoding and batch response splitting.

Packs several independent sub-requests into one ``multipart/mixed`` body in
which every part is an ``application/http`` message carrying its own request
line, headers and body. Each sub-request gets a sequential Content-ID used to
match sub-responses back to it.
"""

import logging
import re
from dataclasses import dataclass, field

from pydantic import BaseModel

from onenote_api.multipart import MultipartBody, MultipartBodyBuilder, Part
from onenote_api.multipart.parts import CRLF
from onenote_api.transport.errors import convert_response_headers

logger = logging.getLogger(__name__)

_BOUNDARY_PATTERN = re.compile(r'boundary="?([^";]+)"?', re.IGNORECASE)
_BLANK_LINE = re.compile(r"\r?\n\r?\n")


@dataclass(frozen=True)
class SubRequest:
    """One request inside a batch."""

    method: str
    relative_url: str
    content_id: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


class BatchResponse(BaseModel):
    """One sub-response extracted from a batch response body."""

    content_id: str
    status_code: int
    headers: dict[str, str] = {}
    body: str = ""


class BatchRequest:
    """Ordered envelope of sub-requests, finalized with build()."""

    def __init__(self) -> None:
        self.requests: list[SubRequest] = []

    def __len__(self) -> int:
        return len(self.requests)

    def add_request(
        self,
        method: str,
        relative_url: str,
        headers: dict[str, str] | None = None,
        body: bytes | str | MultipartBody | None = None,
    ) -> str:
        """Append a sub-request and return its Content-ID ("1", "2", ...).

        A MultipartBody body (e.g. a page from OneNotePage.to_form_data())
        sets the sub-request Content-Type from the body itself.
        """
        sub_headers = dict(headers or {})
        if isinstance(body, MultipartBody):
            sub_headers.setdefault("Content-Type", body.content_type)
            raw_body: bytes | None = body.body
        elif isinstance(body, str):
            raw_body = body.encode("utf-8")
        else:
            raw_body = body

        content_id = str(len(self.requests) + 1)
        self.requests.append(
            SubRequest(
                method=method.upper(),
                relative_url=relative_url,
                content_id=content_id,
                headers=sub_headers,
                body=raw_body,
            )
        )
        return content_id

    add_operation = add_request

    def build(self) -> MultipartBody:
        """Encode all sub-requests into one multipart/mixed body.

        An empty batch yields a valid body holding only the closing delimiter.
        """
        builder = MultipartBodyBuilder(subtype="mixed")
        for request in self.requests:
            builder.add_part(
                Part(
                    name=request.content_id,
                    content=_render_http_request(request),
                    media_type="application/http",
                    headers={
                        "Content-Transfer-Encoding": "binary",
                        "Content-ID": request.content_id,
                    },
                )
            )
        return builder.build()


def _render_http_request(request: SubRequest) -> bytes:
    """Request line, headers, blank line, body."""
    lines = [f"{request.method} {request.relative_url} HTTP/1.1"]
    lines.extend(f"{key}: {value}" for key, value in request.headers.items())
    head = "\r\n".join(lines).encode("utf-8") + CRLF + CRLF
    return head + (request.body or b"")


def parse_batch_response(content_type: str, body: bytes | str) -> list[BatchResponse]:
    """Split a multipart/mixed batch response into its sub-responses.

    Sub-responses keep the order of the body. A part without a Content-ID
    gets its 1-based position. Parts without a parseable status line are
    skipped.
    """
    match = _BOUNDARY_PATTERN.search(content_type)
    if match is None:
        logger.warning("Batch response has no boundary: %s", content_type)
        return []

    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    chunks = text.split(f"--{match.group(1)}")[1:]

    responses: list[BatchResponse] = []
    for position, chunk in enumerate(chunks, start=1):
        if chunk.startswith("--"):
            break
        parsed = _parse_http_part(chunk.strip("\r\n"), str(position))
        if parsed is None:
            logger.warning("Skipping unparseable batch response part %d", position)
            continue
        responses.append(parsed)
    return responses


def _parse_http_part(chunk: str, default_id: str) -> BatchResponse | None:
    pieces = _BLANK_LINE.split(chunk, maxsplit=1)
    if len(pieces) < 2:
        return None
    part_headers = convert_response_headers(pieces[0])

    message = _BLANK_LINE.split(pieces[1], maxsplit=1)
    status_line, _, header_block = message[0].partition("\n")
    status_fields = status_line.strip().split(" ", 2)
    if len(status_fields) < 2 or not status_fields[1].isdigit():
        return None

    headers = convert_response_headers(header_block)
    content_id = part_headers.get("Content-ID") or headers.get("Content-ID") or default_id
    return BatchResponse(
        content_id=content_id.strip("<>"),
        status_code=int(status_fields[1]),
        headers=headers,
        body=message[1].rstrip("\r\n") if len(message) > 1 else "",
    )
