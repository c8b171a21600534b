"""Multipart body builder with collision-checked boundaries.

Composes an ordered list of parts into one body plus the matching
Content-Type header. Used for page submission (``multipart/form-data``)
and, with ``subtype="mixed"``, for batch envelopes.
"""

import logging
import secrets
from collections.abc import Callable
from dataclasses import dataclass

from onenote_api.multipart.parts import CRLF, Part, encode_part

logger = logging.getLogger(__name__)

MAX_BOUNDARY_ATTEMPTS = 5


class BoundaryCollisionError(RuntimeError):
    """No generated boundary avoided the part contents. Indicates a library bug."""


@dataclass(frozen=True)
class MultipartBody:
    """A finished multipart body and the Content-Type header that describes it."""

    content_type: str
    body: bytes
    boundary: str


def generate_boundary() -> str:
    """Return a high-entropy boundary token."""
    return f"OneNoteBoundary{secrets.token_hex(16)}"


class MultipartBodyBuilder:
    """Accumulates parts and serializes them into a MultipartBody."""

    def __init__(
        self,
        subtype: str = "form-data",
        boundary_factory: Callable[[], str] = generate_boundary,
    ) -> None:
        if subtype not in ("form-data", "mixed"):
            raise ValueError(f"Unsupported multipart subtype: {subtype}")
        self.subtype = subtype
        self._boundary_factory = boundary_factory
        self._parts: list[Part] = []

    @property
    def parts(self) -> list[Part]:
        return list(self._parts)

    def add_part(self, part: Part) -> None:
        """Append a part. Names must be unique within one body."""
        if any(existing.name == part.name for existing in self._parts):
            raise ValueError(f"Duplicate part name: {part.name!r}")
        self._parts.append(part)

    def append(self, name: str, content: bytes | str, media_type: str) -> None:
        self.add_part(Part(name=name, content=content, media_type=media_type))

    def get_content_type(self, boundary: str) -> str:
        return f"multipart/{self.subtype}; boundary={boundary}"

    def build(self) -> MultipartBody:
        """Serialize all parts, ending with the closing ``--boundary--`` line."""
        boundary = self._choose_boundary()
        form_data = self.subtype == "form-data"
        chunks = [encode_part(part, boundary, form_data=form_data) for part in self._parts]
        chunks.append(f"--{boundary}--".encode("utf-8") + CRLF)
        return MultipartBody(
            content_type=self.get_content_type(boundary),
            body=b"".join(chunks),
            boundary=boundary,
        )

    def _choose_boundary(self) -> str:
        """Pick a boundary that does not occur in any part's bytes."""
        raw_parts = [part.raw for part in self._parts]
        for attempt in range(1, MAX_BOUNDARY_ATTEMPTS + 1):
            boundary = self._boundary_factory()
            token = boundary.encode("utf-8")
            if not any(token in raw for raw in raw_parts):
                return boundary
            logger.debug("Boundary collision on attempt %d, regenerating", attempt)
        raise BoundaryCollisionError(
            f"Could not find a boundary absent from part contents after "
            f"{MAX_BOUNDARY_ATTEMPTS} attempts"
        )
