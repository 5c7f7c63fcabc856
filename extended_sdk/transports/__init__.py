"""Request transports for the Extended API."""

from .base import (
    HttpMethod,
    PathParams,
    QueryParams,
    RequestTransport,
    build_path,
    build_query,
    raise_if_aborted,
)
from .http import HttpTransport

__all__ = [
    "HttpMethod",
    "PathParams",
    "QueryParams",
    "RequestTransport",
    "HttpTransport",
    "build_path",
    "build_query",
    "raise_if_aborted",
]
