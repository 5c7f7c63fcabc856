"""Info client for the public Extended REST endpoints."""

import asyncio
import re
from typing import Any, Optional, Sequence, Union

from pydantic import TypeAdapter

from .exceptions import ApiError, InvalidInputError, UnexpectedResponseError
from .logger import Logger, NoopLogger
from .schemas import (
    CANDLES_RESPONSE,
    ERROR_RESPONSE,
    FUNDING_HISTORY_RESPONSE,
    MARKET_ORDER_BOOK_RESPONSE,
    MARKET_STATS_RESPONSE,
    MARKET_TRADES_RESPONSE,
    MARKETS_RESPONSE,
    OPEN_INTEREST_RESPONSE,
    UNKNOWN_ERROR_RESPONSE,
    ErrorDetail,
    safe_parse,
)
from .transports.base import RequestTransport
from .types import (
    Candle,
    CandleInterval,
    CandleType,
    FundingHistory,
    Market,
    MarketOrderBook,
    MarketStatsWithDeleverage,
    MarketTrade,
    OpenInterest,
    OpenInterestInterval,
    Pagination,
)

# Uppercase letters and hyphens only, e.g. "BTC-USD"
MARKET_PATTERN = re.compile(r"[A-Z-]+")

FUNDING_LIMIT_MAX = 10_000
OPEN_INTEREST_LIMIT_MAX = 300


class InfoClient:
    """
    Client for the public info endpoints of the Extended API.

    Every method validates its arguments before touching the network, sends
    exactly one request and returns the ``data`` of the ``OK`` envelope.

    Example:
        ```python
        transport = HttpTransport()
        info = InfoClient(transport)

        markets = await info.markets(market=["BTC-USD", "ETH-USD"])
        stats = await info.market_stats("BTC-USD")
        ```
    """

    def __init__(self, transport: RequestTransport, logger: Optional[Logger] = None):
        """
        Initialize info client.

        Args:
            transport: Transport used to reach the API
            logger: Logger instance
        """
        self.transport = transport
        self.logger = logger or NoopLogger()

    # ========================================================================
    # Markets
    # ========================================================================

    async def markets(
        self,
        market: Union[str, Sequence[str], None] = None,
        signal: Optional[asyncio.Event] = None,
    ) -> list[Market]:
        """
        Get available markets with their configuration and statistics.

        Args:
            market: Market name or names to filter by; all markets when omitted
            signal: Cancellation signal

        Returns:
            List of markets
        """
        params: dict[str, Any] = {}
        if market:
            names = [market] if isinstance(market, str) else list(market)
            for name in names:
                _validate_market(name)
            params["market"] = market if isinstance(market, str) else names

        payload = await self.transport.request("GET", "info/markets", params, None, signal)
        return self._unwrap(MARKETS_RESPONSE, payload).data

    async def market_stats(
        self, market: str, signal: Optional[asyncio.Event] = None
    ) -> MarketStatsWithDeleverage:
        """
        Get the latest trading statistics of a market.

        The funding rate returned is the most recent one, recalculated every minute.
        """
        _validate_market(market)
        payload = await self.transport.request(
            "GET", "info/markets/{market}/stats", None, {"market": market}, signal
        )
        return self._unwrap(MARKET_STATS_RESPONSE, payload).data

    async def market_order_book(
        self, market: str, signal: Optional[asyncio.Event] = None
    ) -> MarketOrderBook:
        """Get the latest order book of a market."""
        _validate_market(market)
        payload = await self.transport.request(
            "GET", "info/markets/{market}/orderbook", None, {"market": market}, signal
        )
        return self._unwrap(MARKET_ORDER_BOOK_RESPONSE, payload).data

    async def market_trades(
        self, market: str, signal: Optional[asyncio.Event] = None
    ) -> list[MarketTrade]:
        """Get the latest trades of a market."""
        _validate_market(market)
        payload = await self.transport.request(
            "GET", "info/markets/{market}/trades", None, {"market": market}, signal
        )
        return self._unwrap(MARKET_TRADES_RESPONSE, payload).data

    # ========================================================================
    # History
    # ========================================================================

    async def candles(
        self,
        market: str,
        candle_type: Union[CandleType, str],
        interval: Union[CandleInterval, str],
        limit: int,
        end_time: Optional[int] = None,
        signal: Optional[asyncio.Event] = None,
    ) -> list[Candle]:
        """
        Get the candle history of a market for one price type.

        Args:
            market: Market name
            candle_type: "trades", "mark-prices" or "index-prices"
            interval: Time between candles, e.g. "1m" or "1h"
            limit: Maximum number of candles to return
            end_time: Optional end timestamp in epoch milliseconds
            signal: Cancellation signal

        Returns:
            List of candles
        """
        _validate_market(market)
        if not interval or not isinstance(interval, str):
            raise InvalidInputError("Interval is required.")
        if not _is_int(limit) or limit <= 0:
            raise InvalidInputError("Limit must be a positive number.")
        try:
            candle_type = CandleType(candle_type)
        except ValueError:
            raise InvalidInputError("Invalid candleType.") from None
        if end_time is not None:
            _require_positive_int(end_time, "End time must be a positive number.")

        params: dict[str, Any] = {"interval": _enum_value(interval), "limit": limit}
        if end_time is not None:
            params["endTime"] = end_time

        payload = await self.transport.request(
            "GET",
            "info/candles/{market}/{candleType}",
            params,
            {"market": market, "candleType": candle_type.value},
            signal,
        )
        return self._unwrap(CANDLES_RESPONSE, payload).data

    async def funding(
        self,
        market: str,
        start_time: int,
        end_time: int,
        cursor: Optional[int] = None,
        limit: Optional[int] = None,
        signal: Optional[asyncio.Event] = None,
    ) -> FundingHistory:
        """
        Get one page of funding rate history of a market.

        Pass ``pagination.cursor`` of a previous page as ``cursor`` to get the
        next one. When the server omits pagination, a single page of
        ``{cursor: 0, count: len(data)}`` is reported.

        Args:
            market: Market name
            start_time: Start of the period in epoch milliseconds
            end_time: End of the period in epoch milliseconds
            cursor: Offset of the page to return
            limit: Maximum number of items, 1 to 10000
            signal: Cancellation signal

        Returns:
            Funding rates and pagination information
        """
        _validate_market(market)
        _validate_time_range(start_time, end_time)
        if cursor is not None and (not _is_int(cursor) or cursor < 0):
            raise InvalidInputError("Cursor must be a non-negative number.")
        _validate_limit(limit, FUNDING_LIMIT_MAX)

        params: dict[str, Any] = {"startTime": start_time, "endTime": end_time}
        if cursor is not None:
            params["cursor"] = cursor
        if limit is not None:
            params["limit"] = limit

        payload = await self.transport.request(
            "GET", "info/{market}/funding", params, {"market": market}, signal
        )
        response = self._unwrap(FUNDING_HISTORY_RESPONSE, payload)
        pagination = response.pagination or Pagination(cursor=0, count=len(response.data))
        return FundingHistory(data=response.data, pagination=pagination)

    async def open_interest(
        self,
        market: str,
        interval: Union[OpenInterestInterval, str],
        start_time: int,
        end_time: int,
        limit: Optional[int] = None,
        signal: Optional[asyncio.Event] = None,
    ) -> list[OpenInterest]:
        """
        Get the open interest history of a market.

        Args:
            market: Market name
            interval: "P1H" for hourly or "P1D" for daily points
            start_time: Start of the period in epoch milliseconds
            end_time: End of the period in epoch milliseconds
            limit: Maximum number of items, 1 to 300
            signal: Cancellation signal

        Returns:
            List of open interest points
        """
        _validate_market(market)
        try:
            interval = OpenInterestInterval(interval)
        except ValueError:
            raise InvalidInputError("Interval must be P1H or P1D.") from None
        _validate_time_range(start_time, end_time)
        _validate_limit(limit, OPEN_INTEREST_LIMIT_MAX)

        params: dict[str, Any] = {
            "interval": interval.value,
            "startTime": start_time,
            "endTime": end_time,
        }
        if limit is not None:
            params["limit"] = limit

        payload = await self.transport.request(
            "GET", "info/{market}/open-interests", params, {"market": market}, signal
        )
        return self._unwrap(OPEN_INTEREST_RESPONSE, payload).data

    # ========================================================================
    # Envelope handling
    # ========================================================================

    def _unwrap(self, schema: TypeAdapter, payload: Any) -> Any:
        """Return the ``OK`` envelope or raise for anything else."""
        result = safe_parse(schema, payload)
        if result.success:
            response = result.data
            if response.status == "OK":
                return response
            raise self._api_error(response.error)

        # An ERROR envelope is a server error whatever its code
        for fallback_schema in (ERROR_RESPONSE, UNKNOWN_ERROR_RESPONSE):
            fallback = safe_parse(fallback_schema, payload)
            if fallback.success:
                raise self._api_error(fallback.data.error)

        self.logger.error(f"Unexpected response format: {result.error}")
        raise UnexpectedResponseError(payload, result.error)

    def _api_error(self, error: ErrorDetail) -> ApiError:
        code = _enum_value(error.code)
        self.logger.warn(f"API error {code}: {error.message}")
        return ApiError(code, error.message)


# ============================================================================
# Argument validation
# ============================================================================


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _enum_value(value: Any) -> Any:
    return getattr(value, "value", value)


def _validate_market(market: Any) -> None:
    if not isinstance(market, str) or not MARKET_PATTERN.fullmatch(market):
        raise InvalidInputError("Invalid market input.")


def _require_positive_int(value: Any, message: str) -> None:
    if not _is_int(value) or value <= 0:
        raise InvalidInputError(message)


def _validate_time_range(start_time: Any, end_time: Any) -> None:
    _require_positive_int(start_time, "Start time must be a positive number.")
    _require_positive_int(end_time, "End time must be a positive number.")
    if start_time >= end_time:
        raise InvalidInputError("Start time must be before end time.")


def _validate_limit(limit: Any, maximum: int) -> None:
    if limit is not None and (not _is_int(limit) or not 1 <= limit <= maximum):
        raise InvalidInputError(f"Limit must be between 1 and {maximum}.")
