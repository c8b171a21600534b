"""HTTP transport and classification of its outcomes."""

from onenote_api.transport.errors import (
    classify_outcome,
    convert_response_headers,
    create_request_error,
)
from onenote_api.transport.httpx_transport import HttpxTransport

__all__ = [
    "HttpxTransport",
    "classify_outcome",
    "convert_response_headers",
    "create_request_error",
]
