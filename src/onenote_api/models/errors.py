"""Request outcome models: transport facts, classified errors, success package."""

from enum import Enum
from typing import Any

from pydantic import BaseModel


class RequestErrorType(str, Enum):
    """Closed taxonomy of request failures."""

    NETWORK_ERROR = "NETWORK_ERROR"
    UNEXPECTED_RESPONSE_STATUS = "UNEXPECTED_RESPONSE_STATUS"
    REQUEST_TIMED_OUT = "REQUEST_TIMED_OUT"
    UNABLE_TO_PARSE_RESPONSE = "UNABLE_TO_PARSE_RESPONSE"


class TransportOutcome(BaseModel):
    """The facts about one finished HTTP attempt. Holds no transport handle."""

    completed: bool
    timed_out: bool = False
    status_code: int | None = None
    response_body: str | None = None
    raw_headers: str = ""  # Newline-delimited "Name: value" block


class RequestError(BaseModel):
    """A failed request attempt, classified into RequestErrorType."""

    error: RequestErrorType
    message: str
    status_code: int | None = None
    response: str | None = None
    response_headers: dict[str, str] = {}
    timeout: int | None = None  # Configured timeout in ms, for REQUEST_TIMED_OUT


class ResponsePackage(BaseModel):
    """A successful request: parsed JSON body plus response metadata."""

    parsed_response: Any = None  # None for empty success bodies (e.g. 204)
    status_code: int
    response_headers: dict[str, str] = {}
