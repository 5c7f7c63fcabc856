"""Main Extended SDK client with unified interface."""

import asyncio
from typing import Any, Mapping, Optional, Sequence, Union

import httpx

from .config import DEFAULT_TIMEOUT_MS, ServerConfig
from .info import InfoClient
from .logger import ConsoleLogger, Logger, LogLevel
from .transports.base import RequestTransport
from .transports.http import Hook, HttpTransport
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
)


class ExtendedClient:
    """
    Main Extended SDK client bundling a transport and the info endpoints.

    Example:
        ```python
        async with ExtendedClient(is_testnet=True) as client:
            markets = await client.markets()
            book = await client.market_order_book("BTC-USD")

            stop = asyncio.Event()
            trades = await client.market_trades("ETH-USD", signal=stop)
        ```
    """

    def __init__(
        self,
        is_testnet: bool = False,
        timeout_ms: Optional[int] = DEFAULT_TIMEOUT_MS,
        servers: Union[ServerConfig, Mapping[str, Any], None] = None,
        request_options: Optional[Mapping[str, Any]] = None,
        on_request: Optional[Hook[httpx.Request]] = None,
        on_response: Optional[Hook[httpx.Response]] = None,
        log_level: LogLevel = LogLevel.INFO,
        logger: Optional[Logger] = None,
        transport: Optional[RequestTransport] = None,
    ):
        """
        Initialize the Extended SDK.

        Args:
            is_testnet: Use the testnet host instead of mainnet
            timeout_ms: Request timeout in milliseconds; None disables it
            servers: Host override per environment
            request_options: httpx request options merged into every request
            on_request: Hook called with every outgoing request
            on_response: Hook called with every incoming response
            log_level: Minimum log level
            logger: Custom logger instance
            transport: Custom transport; the HTTP options above are ignored when given
        """
        self.logger = logger or ConsoleLogger(level=log_level)

        self.transport = transport or HttpTransport(
            is_testnet=is_testnet,
            timeout_ms=timeout_ms,
            servers=servers,
            request_options=request_options,
            on_request=on_request,
            on_response=on_response,
            logger=self.logger,
        )
        self.info = InfoClient(self.transport, logger=self.logger)

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the transport."""
        await self.transport.close()

    # ========================================================================
    # Convenience Methods - Info API
    # ========================================================================

    async def markets(
        self,
        market: Union[str, Sequence[str], None] = None,
        signal: Optional[asyncio.Event] = None,
    ) -> list[Market]:
        """Get available markets, optionally filtered by name."""
        return await self.info.markets(market, signal=signal)

    async def market_stats(
        self, market: str, signal: Optional[asyncio.Event] = None
    ) -> MarketStatsWithDeleverage:
        """Get market statistics."""
        return await self.info.market_stats(market, signal=signal)

    async def market_order_book(
        self, market: str, signal: Optional[asyncio.Event] = None
    ) -> MarketOrderBook:
        """Get market order book."""
        return await self.info.market_order_book(market, signal=signal)

    async def market_trades(
        self, market: str, signal: Optional[asyncio.Event] = None
    ) -> list[MarketTrade]:
        """Get latest market trades."""
        return await self.info.market_trades(market, signal=signal)

    async def candles(
        self,
        market: str,
        candle_type: Union[CandleType, str],
        interval: Union[CandleInterval, str],
        limit: int,
        end_time: Optional[int] = None,
        signal: Optional[asyncio.Event] = None,
    ) -> list[Candle]:
        """Get candle history for a market."""
        return await self.info.candles(
            market, candle_type, interval, limit, end_time=end_time, signal=signal
        )

    async def funding(
        self,
        market: str,
        start_time: int,
        end_time: int,
        cursor: Optional[int] = None,
        limit: Optional[int] = None,
        signal: Optional[asyncio.Event] = None,
    ) -> FundingHistory:
        """Get one page of funding rate history."""
        return await self.info.funding(
            market, start_time, end_time, cursor=cursor, limit=limit, signal=signal
        )

    async def open_interest(
        self,
        market: str,
        interval: Union[OpenInterestInterval, str],
        start_time: int,
        end_time: int,
        limit: Optional[int] = None,
        signal: Optional[asyncio.Event] = None,
    ) -> list[OpenInterest]:
        """Get open interest history."""
        return await self.info.open_interest(
            market, interval, start_time, end_time, limit=limit, signal=signal
        )
