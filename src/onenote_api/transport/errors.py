"""Classification of finished HTTP attempts into success or RequestError.

Order of checks (first match wins): timed out, no response, non-success
status, unparseable body, success. A 2xx response with an empty body is a
success whose parsed_response is None.
"""

import json
import re
from collections.abc import Callable, Collection
from typing import Any

from onenote_api.models.errors import (
    RequestError,
    RequestErrorType,
    ResponsePackage,
    TransportOutcome,
)

_LINE_SPLIT = re.compile(r"\r?\n")

_MESSAGES = {
    RequestErrorType.NETWORK_ERROR: "Network error",
    RequestErrorType.UNEXPECTED_RESPONSE_STATUS: "Unexpected response status",
    RequestErrorType.REQUEST_TIMED_OUT: "Request timed out",
    RequestErrorType.UNABLE_TO_PARSE_RESPONSE: "Unable to parse response",
}


def convert_response_headers(raw_headers: str) -> dict[str, str]:
    """Split a raw header block into a case-sensitive name -> value mapping.

    Lines without a ``:`` separator are skipped. Later duplicates win.
    """
    headers: dict[str, str] = {}
    for line in _LINE_SPLIT.split(raw_headers or ""):
        name, sep, value = line.partition(":")
        if not sep or not name.strip():
            continue
        headers[name.strip()] = value.strip()
    return headers


def create_request_error(
    error_type: RequestErrorType,
    outcome: TransportOutcome | None = None,
    timeout_ms: int | None = None,
) -> RequestError:
    """Build a RequestError of ``error_type`` from whatever the outcome recorded."""
    outcome = outcome or TransportOutcome(completed=False)
    return RequestError(
        error=error_type,
        message=_MESSAGES[error_type],
        status_code=outcome.status_code,
        response=outcome.response_body,
        response_headers=convert_response_headers(outcome.raw_headers),
        timeout=timeout_ms if error_type == RequestErrorType.REQUEST_TIMED_OUT else None,
    )


def classify_outcome(
    outcome: TransportOutcome,
    timeout_ms: int | None = None,
    expected_codes: Collection[int] | None = None,
    parse: Callable[[str], Any] = json.loads,
) -> ResponsePackage | RequestError:
    """Turn a finished attempt into a ResponsePackage or a classified RequestError.

    ``expected_codes`` narrows the accepted statuses; by default any 2xx is
    accepted. ``parse`` decodes non-empty success bodies (JSON by default).
    """
    if outcome.timed_out:
        return create_request_error(RequestErrorType.REQUEST_TIMED_OUT, outcome, timeout_ms)

    if not outcome.completed or outcome.status_code is None:
        return create_request_error(RequestErrorType.NETWORK_ERROR, outcome)

    status = outcome.status_code
    accepted = status in expected_codes if expected_codes is not None else 200 <= status < 300
    if not accepted:
        return create_request_error(RequestErrorType.UNEXPECTED_RESPONSE_STATUS, outcome)

    body = outcome.response_body or ""
    parsed = None
    if body.strip():
        try:
            parsed = parse(body)
        except ValueError:
            return create_request_error(RequestErrorType.UNABLE_TO_PARSE_RESPONSE, outcome)

    return ResponsePackage(
        parsed_response=parsed,
        status_code=status,
        response_headers=convert_response_headers(outcome.raw_headers),
    )
