"""Tests for the multipart body builder."""

import pytest

from onenote_api.multipart import (
    MAX_BOUNDARY_ATTEMPTS,
    BoundaryCollisionError,
    MultipartBodyBuilder,
    Part,
)


def _fixed(*boundaries: str):
    """Boundary factory returning the given tokens in order."""
    tokens = iter(boundaries)
    return lambda: next(tokens)


def test_single_text_part_exact_bytes():
    """A text part is framed by delimiter, headers, blank line and CRLF."""
    builder = MultipartBodyBuilder(boundary_factory=_fixed("XYZ"))
    builder.append("Presentation", "<p>hi</p>", "text/html")
    result = builder.build()

    assert result.content_type == "multipart/form-data; boundary=XYZ"
    assert result.body == (
        b"--XYZ\r\n"
        b'Content-Disposition: form-data; name="Presentation"\r\n'
        b"Content-Type: text/html\r\n"
        b"\r\n"
        b"<p>hi</p>\r\n"
        b"--XYZ--\r\n"
    )


def test_binary_part_written_raw():
    """Binary content is copied byte-for-byte, not re-encoded."""
    data = bytes(range(256))
    builder = MultipartBodyBuilder()
    builder.append("file", data, "application/pdf")
    result = builder.build()

    assert data in result.body


def test_text_part_utf8_encoded():
    builder = MultipartBodyBuilder(boundary_factory=_fixed("B"))
    builder.append("text", "café", "text/plain")
    assert "café".encode("utf-8") in builder.build().body


def test_parts_round_trip_in_order(split_multipart):
    """Splitting the body on its boundary yields the original parts in order."""
    parts = [
        Part("one", "first", "text/plain"),
        Part("two", b"\x00\x01\r\n\r\nbinary", "application/octet-stream"),
        Part("three", "<b>third</b>", "text/html"),
    ]
    builder = MultipartBodyBuilder()
    for part in parts:
        builder.add_part(part)
    result = builder.build()

    parsed = split_multipart(result.body, result.boundary)
    assert [h["Content-Type"] for h, _ in parsed] == [p.media_type for p in parts]
    assert [h["Content-Disposition"] for h, _ in parsed] == [
        f'form-data; name="{p.name}"' for p in parts
    ]
    assert [content for _, content in parsed] == [p.raw for p in parts]


def test_boundary_only_at_delimiters():
    """The boundary appears once per part plus once for the closing line."""
    builder = MultipartBodyBuilder()
    builder.append("a", "alpha", "text/plain")
    builder.append("b", b"beta", "application/octet-stream")
    result = builder.build()

    assert result.body.count(result.boundary.encode()) == 3
    assert result.body.endswith(f"--{result.boundary}--\r\n".encode())


def test_empty_builder_is_valid_body():
    """No parts still produces the closing delimiter."""
    result = MultipartBodyBuilder(boundary_factory=_fixed("EMPTY")).build()
    assert result.body == b"--EMPTY--\r\n"


def test_mixed_subtype_omits_disposition():
    builder = MultipartBodyBuilder(subtype="mixed", boundary_factory=_fixed("M"))
    builder.add_part(Part("1", "GET / HTTP/1.1", "application/http", {"Content-ID": "1"}))
    result = builder.build()

    assert result.content_type == "multipart/mixed; boundary=M"
    assert b"Content-Disposition" not in result.body
    assert b"Content-Type: application/http\r\nContent-ID: 1\r\n\r\n" in result.body


def test_unsupported_subtype_rejected():
    with pytest.raises(ValueError):
        MultipartBodyBuilder(subtype="alternative")


def test_boundary_regenerated_on_collision():
    """A boundary found inside part content is discarded for a fresh one."""
    builder = MultipartBodyBuilder(boundary_factory=_fixed("CLASH", "FRESH"))
    builder.append("doc", "text containing CLASH inside", "text/plain")
    result = builder.build()

    assert result.boundary == "FRESH"
    assert result.content_type.endswith("boundary=FRESH")


def test_boundary_collision_exhausted():
    """Every attempt colliding raises the internal error."""
    builder = MultipartBodyBuilder(boundary_factory=lambda: "SAME")
    builder.append("doc", "SAME", "text/plain")
    with pytest.raises(BoundaryCollisionError):
        builder.build()


def test_collision_attempts_bounded():
    calls = []

    def factory():
        calls.append(1)
        return "SAME"

    builder = MultipartBodyBuilder(boundary_factory=factory)
    builder.append("doc", "SAME", "text/plain")
    with pytest.raises(BoundaryCollisionError):
        builder.build()
    assert len(calls) == MAX_BOUNDARY_ATTEMPTS


def test_duplicate_part_name_rejected():
    builder = MultipartBodyBuilder()
    builder.append("dup", "a", "text/plain")
    with pytest.raises(ValueError, match="Duplicate"):
        builder.append("dup", "b", "text/plain")


def test_part_requires_media_type():
    with pytest.raises(ValueError):
        Part("name", "content", "")


def test_part_requires_name():
    with pytest.raises(ValueError):
        Part("", "content", "text/plain")


def test_parts_property_is_copy():
    builder = MultipartBodyBuilder()
    builder.append("a", "x", "text/plain")
    builder.parts.clear()
    assert len(builder.parts) == 1
