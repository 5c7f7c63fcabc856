"""Exception hierarchy for the Extended SDK.

Callers can branch on the error kind to decide recoverability:

- ``InvalidInputError``: arguments rejected locally, no request was sent
- ``TransportError``: no usable JSON body came back (HTTP status, content
  type, network failure, timeout or abort)
- ``ApiError``: the server answered with an ``ERROR`` envelope
- ``UnexpectedResponseError``: the body matched neither envelope variant
"""

import json
from typing import Any, Optional

import httpx
from pydantic import ValidationError


class ExtendedError(Exception):
    """Base exception for all SDK errors."""


class InvalidInputError(ExtendedError):
    """Raised when caller-supplied arguments fail local validation."""


class TransportError(ExtendedError):
    """Base class for all transport-related errors."""


class HttpRequestError(TransportError):
    """
    Raised when an HTTP response is deemed invalid.

    Covers non-2xx status codes, an unexpected content type and an
    unparsable JSON body.
    """

    def __init__(
        self,
        response: httpx.Response,
        response_body: Optional[str] = None,
        reason: Optional[str] = None,
    ):
        """
        Initialize HTTP request error.

        Args:
            response: The failed HTTP response
            response_body: Raw response body text, if it could be read
            reason: Short description of why the response was rejected
        """
        self.response = response
        self.status = response.status_code
        self.response_body = response_body
        self.reason = reason

        message = f"HTTP request failed: status {self.status}"
        if reason:
            message += f", {reason}"
        if response_body:
            message += f', body "{response_body}"'
        super().__init__(message)


class NetworkError(TransportError):
    """Raised when the network layer fails before a response is received."""


class RequestTimeoutError(TransportError):
    """Raised when no response arrives within the configured timeout."""

    def __init__(self, timeout_ms: int):
        self.timeout_ms = timeout_ms
        super().__init__(f"Request timed out after {timeout_ms} ms")


class RequestAbortedError(TransportError):
    """Raised when the caller's cancellation signal fires."""

    def __init__(self, message: str = "Request aborted by caller"):
        super().__init__(message)


class ApiError(ExtendedError):
    """Server-reported error carried by an ``ERROR`` response envelope."""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"API Error: {code} - {message}")


class UnexpectedResponseError(ExtendedError):
    """Raised when a response body matches neither envelope variant."""

    def __init__(self, payload: Any, validation_error: Optional[ValidationError] = None):
        self.payload = payload
        self.validation_error = validation_error
        super().__init__(f"Unexpected response format: {_dump(payload)}")


def _dump(payload: Any) -> str:
    try:
        return json.dumps(payload)
    except (TypeError, ValueError):
        return repr(payload)
