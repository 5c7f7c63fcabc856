"""
Request transport interface.

Endpoint clients depend only on ``RequestTransport``, so the HTTP
implementation can be swapped for any other (an in-memory fake in tests,
for instance) without touching client logic.
"""

import asyncio
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Literal, Mapping, Optional, Sequence, Union
from urllib.parse import quote

from ..exceptions import InvalidInputError, RequestAbortedError

HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]

QueryScalar = Union[str, int, float, bool]
QueryParams = Mapping[str, Union[QueryScalar, Sequence[QueryScalar], None]]
PathParams = Mapping[str, Union[str, int]]

_PLACEHOLDER = re.compile(r"\{([^{}/]+)\}")


class RequestTransport(ABC):
    """Abstract transport issuing one logical request per call."""

    @abstractmethod
    async def request(
        self,
        method: HttpMethod,
        path: str,
        params: Optional[QueryParams] = None,
        path_params: Optional[PathParams] = None,
        signal: Optional[asyncio.Event] = None,
    ) -> Any:
        """
        Send a request to the Extended API.

        Args:
            method: HTTP method
            path: Path template below the API prefix, e.g. "info/markets/{market}/stats"
            params: Query parameters; sequence values become repeated keys
            path_params: Values substituted into the ``{name}`` placeholders
            signal: Cancellation signal; the call fails once it is set

        Returns:
            Decoded JSON body, not validated against any schema

        Raises:
            TransportError: If no usable JSON body could be obtained
        """
        ...

    async def close(self) -> None:
        """Release transport resources."""

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


def build_path(template: str, path_params: Optional[PathParams] = None) -> str:
    """
    Substitute every ``{key}`` placeholder in ``template``.

    Raises:
        InvalidInputError: If a placeholder has no value in ``path_params``
    """
    path = template
    for key, value in (path_params or {}).items():
        path = path.replace(f"{{{key}}}", quote(_query_value(value), safe=""))

    missing = _PLACEHOLDER.findall(path)
    if missing:
        raise InvalidInputError(f"Missing path parameter(s): {', '.join(missing)}")
    return path


def build_query(params: Optional[QueryParams] = None) -> list[tuple[str, str]]:
    """
    Serialize query parameters to ordered ``(key, value)`` pairs.

    Scalars give one pair, lists and tuples one pair per element in order.
    ``None`` values are skipped.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _query_value(item)) for item in value)
        else:
            pairs.append((key, _query_value(value)))
    return pairs


def _query_value(value: QueryScalar) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def raise_if_aborted(signal: Optional[asyncio.Event]) -> None:
    """Fail fast when the caller's signal is already set."""
    if signal is not None and signal.is_set():
        raise RequestAbortedError("Request aborted before it was sent")
