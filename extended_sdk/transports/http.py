"""HTTP implementation of the request transport, built on httpx."""

import asyncio
import inspect
from typing import Any, Awaitable, Callable, Mapping, Optional, TypeVar, Union

import httpx

from ..config import API_PREFIX, DEFAULT_TIMEOUT_MS, ServerConfig
from ..exceptions import (
    HttpRequestError,
    NetworkError,
    RequestAbortedError,
    RequestTimeoutError,
)
from ..logger import Logger, NoopLogger
from .base import (
    HttpMethod,
    PathParams,
    QueryParams,
    RequestTransport,
    build_path,
    build_query,
    raise_if_aborted,
)

_T = TypeVar("_T")

# A hook may be a plain function or a coroutine function. Returning None
# keeps the original object.
Hook = Callable[[_T], Union[Optional[_T], Awaitable[Optional[_T]]]]

# Keyword arguments forwarded to httpx.AsyncClient.build_request
_REQUEST_OPTION_KEYS = frozenset({"headers", "cookies", "extensions"})


class HttpTransport(RequestTransport):
    """
    REST transport for the Extended API.

    Each call builds ``{host}/api/v1/{path}``, sends it through an
    ``httpx.AsyncClient`` and returns the decoded JSON body. The configured
    timeout and the caller's signal are observed together: whichever fires
    first ends the call.

    Example:
        ```python
        async with HttpTransport(is_testnet=True, timeout_ms=5_000) as transport:
            body = await transport.request(
                "GET", "info/markets/{market}/stats", path_params={"market": "BTC-USD"}
            )
        ```
    """

    def __init__(
        self,
        *,
        is_testnet: bool = False,
        timeout_ms: Optional[int] = DEFAULT_TIMEOUT_MS,
        servers: Union[ServerConfig, Mapping[str, Any], None] = None,
        request_options: Optional[Mapping[str, Any]] = None,
        on_request: Optional[Hook[httpx.Request]] = None,
        on_response: Optional[Hook[httpx.Response]] = None,
        client: Optional[httpx.AsyncClient] = None,
        logger: Optional[Logger] = None,
    ):
        """
        Initialize HTTP transport.

        Args:
            is_testnet: Use the testnet host instead of mainnet
            timeout_ms: Request timeout in milliseconds; None or 0 disables it
            servers: Host override per environment
            request_options: httpx request options (headers, cookies, extensions)
                merged into every request
            on_request: Called with the outgoing request; may return a replacement
            on_response: Called with the incoming response; may return a replacement
            client: Externally managed httpx client; it is not closed by ``close()``
            logger: Logger instance
        """
        if timeout_ms is not None and timeout_ms < 0:
            raise ValueError("timeout_ms must be a non-negative number of milliseconds or None")

        unknown = set(request_options or {}) - _REQUEST_OPTION_KEYS
        if unknown:
            raise ValueError(f"Unsupported request options: {', '.join(sorted(unknown))}")

        self.is_testnet = is_testnet
        self.timeout_ms = timeout_ms or None
        self.servers = servers if isinstance(servers, ServerConfig) else ServerConfig(**(servers or {}))
        self.request_options = dict(request_options or {})
        self.on_request = on_request
        self.on_response = on_response
        self.logger = logger or NoopLogger()

        self._owns_client = client is None
        # Timing is enforced per call below, not by httpx
        self._client = client or httpx.AsyncClient(timeout=None)

    @property
    def base_url(self) -> str:
        """Host of the selected environment."""
        return self.servers.api_url(self.is_testnet)

    async def close(self) -> None:
        """Close the underlying httpx client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

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

        Raises:
            RequestAbortedError: If ``signal`` is set before or during the call
            RequestTimeoutError: If the timeout elapses first
            NetworkError: If httpx fails to get or read a response
            HttpRequestError: On a non-2xx status, a non-JSON content type or
                an unparsable body
        """
        raise_if_aborted(signal)

        url = f"{self.base_url}/{API_PREFIX}/{build_path(path, path_params)}"
        request = self._build_request(method, url, build_query(params))
        self.logger.debug(f"{method} {request.url}")

        response = await self._run(self._exchange(request), signal)
        return await self._decode(response)

    def _build_request(
        self, method: str, url: str, query: list[tuple[str, str]]
    ) -> httpx.Request:
        options = dict(self.request_options)
        headers = {"Accept": "application/json"}
        headers.update(options.pop("headers", None) or {})
        return self._client.build_request(
            method, url, params=query or None, headers=headers, **options
        )

    async def _exchange(self, request: httpx.Request) -> httpx.Response:
        replacement = await _call_hook(self.on_request, request)
        if replacement is not None:
            request = replacement

        try:
            response = await self._client.send(request)
        except httpx.RequestError as exc:
            self.logger.warn(f"{request.method} {request.url} failed: {exc!r}")
            raise NetworkError(f"Request to {request.url} failed: {exc}") from exc

        replacement = await _call_hook(self.on_response, response)
        return replacement if replacement is not None else response

    async def _run(
        self, work: Awaitable[httpx.Response], signal: Optional[asyncio.Event]
    ) -> httpx.Response:
        """Race the exchange against the caller's signal and the timeout."""
        exchange = asyncio.ensure_future(work)
        aborted = asyncio.ensure_future(signal.wait()) if signal is not None else None
        waiters = {exchange} if aborted is None else {exchange, aborted}
        timeout = self.timeout_ms / 1000 if self.timeout_ms else None

        try:
            done, _ = await asyncio.wait(
                waiters, timeout=timeout, return_when=asyncio.FIRST_COMPLETED
            )
            if aborted is not None and aborted in done:
                self.logger.warn("Request aborted by caller")
                raise RequestAbortedError()
            if exchange in done:
                return exchange.result()
            self.logger.warn(f"Request timed out after {self.timeout_ms} ms")
            raise RequestTimeoutError(self.timeout_ms)
        finally:
            pending = [task for task in waiters if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)
            # Mark a failed exchange as retrieved when another waiter won
            if exchange.done() and not exchange.cancelled():
                exchange.exception()

    async def _decode(self, response: httpx.Response) -> Any:
        if not response.is_success:
            body = await _read_body(response)
            self.logger.warn(f"HTTP {response.status_code} response")
            raise HttpRequestError(response, body)

        content_type = response.headers.get("content-type")
        if not content_type or "application/json" not in content_type:
            raise HttpRequestError(
                response, reason=f"expected JSON response, got {content_type}"
            )

        try:
            await response.aread()
        except (httpx.HTTPError, httpx.StreamError) as exc:
            raise NetworkError(f"Failed to read response body: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise HttpRequestError(response, reason="invalid JSON body") from exc


async def _call_hook(hook: Optional[Hook[_T]], value: _T) -> Optional[_T]:
    if hook is None:
        return None
    result = hook(value)
    if inspect.isawaitable(result):
        result = await result
    return result


async def _read_body(response: httpx.Response) -> Optional[str]:
    # Best effort: the status code matters more than the body
    try:
        await response.aread()
        return response.text or None
    except (httpx.HTTPError, httpx.StreamError, UnicodeDecodeError):
        return None
