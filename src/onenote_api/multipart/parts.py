"""Single multipart part and its wire encoding."""

from dataclasses import dataclass, field

CRLF = b"\r\n"


@dataclass(frozen=True)
class Part:
    """One named content part of a multipart body.

    Text content is sent as UTF-8; bytes content is written unchanged so
    binary attachments are never re-encoded.
    """

    name: str
    content: bytes | str
    media_type: str
    headers: dict[str, str] = field(default_factory=dict)  # Extra part header lines

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Part name must be non-empty")
        if not self.media_type:
            raise ValueError(f"Part {self.name!r} has an empty media type")

    @property
    def raw(self) -> bytes:
        """Content as the exact bytes written to the body."""
        if isinstance(self.content, bytes):
            return self.content
        return self.content.encode("utf-8")


def encode_part(part: Part, boundary: str, form_data: bool = True) -> bytes:
    """Encode one part: delimiter, headers, blank line, raw content, CRLF.

    ``form_data`` adds the ``Content-Disposition: form-data`` line naming the
    part; ``multipart/mixed`` bodies omit it.
    """
    lines = [f"--{boundary}"]
    if form_data:
        lines.append(f'Content-Disposition: form-data; name="{part.name}"')
    lines.append(f"Content-Type: {part.media_type}")
    for key, value in part.headers.items():
        lines.append(f"{key}: {value}")
    head = "\r\n".join(lines).encode("utf-8")
    return head + CRLF + CRLF + part.raw + CRLF
