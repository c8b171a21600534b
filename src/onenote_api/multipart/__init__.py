"""Multipart body encoding for page and batch submission."""

from onenote_api.multipart.builder import (
    MAX_BOUNDARY_ATTEMPTS,
    BoundaryCollisionError,
    MultipartBody,
    MultipartBodyBuilder,
    generate_boundary,
)
from onenote_api.multipart.parts import Part, encode_part

__all__ = [
    "BoundaryCollisionError",
    "MAX_BOUNDARY_ATTEMPTS",
    "MultipartBody",
    "MultipartBodyBuilder",
    "Part",
    "encode_part",
    "generate_boundary",
]
