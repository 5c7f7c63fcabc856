"""Tests for the info client."""

import asyncio
from io import StringIO

import pytest

from extended_sdk import (
    ApiError,
    CandleType,
    ConsoleLogger,
    InfoClient,
    InvalidInputError,
    LogLevel,
    OpenInterestInterval,
    RequestAbortedError,
    UnexpectedResponseError,
)

from conftest import (
    FakeTransport,
    candle_payload,
    error,
    funding_rate_payload,
    market_payload,
    market_stats_with_deleverage_payload,
    ok,
    open_interest_payload,
    order_book_payload,
    trade_payload,
)

START = 1701475200000
END = 1701561600000


class TestMarkets:
    """Test the markets endpoint."""

    @pytest.mark.asyncio
    async def test_all_markets(self, transport, info):
        """Test listing without a filter."""
        transport.payload = ok([market_payload("BTC-USD"), market_payload("ETH-USD")])

        markets = await info.markets()

        assert [m.name for m in markets] == ["BTC-USD", "ETH-USD"]
        assert transport.calls[0]["method"] == "GET"
        assert transport.calls[0]["path"] == "info/markets"
        assert transport.calls[0]["params"] == {}

    @pytest.mark.asyncio
    async def test_filter_by_several_markets(self, transport, info):
        """Test that a list filter is forwarded as repeated values."""
        transport.payload = ok([market_payload("BTC-USD"), market_payload("ETH-USD")])

        await info.markets(market=["BTC-USD", "ETH-USD"])

        assert transport.calls[0]["params"] == {"market": ["BTC-USD", "ETH-USD"]}

    @pytest.mark.asyncio
    async def test_filter_by_one_market(self, transport, info):
        """Test a single market filter."""
        transport.payload = ok([market_payload()])

        await info.markets(market="BTC-USD")

        assert transport.calls[0]["params"] == {"market": "BTC-USD"}

    @pytest.mark.asyncio
    async def test_invalid_filter_symbol(self, transport, info):
        """Test that each filter symbol is validated."""
        with pytest.raises(InvalidInputError):
            await info.markets(market=["BTC-USD", "eth-usd"])

        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_market_not_found(self, transport, info):
        """Test that an ERROR envelope becomes an ApiError."""
        transport.payload = error("MarketNotFound", "Market not found")

        with pytest.raises(ApiError) as exc_info:
            await info.markets(market="NONEXISTENT-MARKET")

        assert exc_info.value.code == "MarketNotFound"
        assert exc_info.value.message == "Market not found"
        assert str(exc_info.value) == "API Error: MarketNotFound - Market not found"


class TestMarketEndpoints:
    """Test the single-market endpoints."""

    @pytest.mark.asyncio
    async def test_market_stats(self, transport, info):
        """Test stats path and decoding."""
        transport.payload = ok(market_stats_with_deleverage_payload())

        stats = await info.market_stats("BTC-USD")

        assert transport.calls[0]["path"] == "info/markets/{market}/stats"
        assert transport.calls[0]["path_params"] == {"market": "BTC-USD"}
        assert transport.calls[0]["params"] is None
        assert stats.last_price == "43250.5"
        assert stats.daily_price_change == "-512.5"
        assert len(stats.deleverage_levels.short_positions) == 2

    @pytest.mark.asyncio
    async def test_market_order_book(self, transport, info):
        """Test order book path and decoding."""
        transport.payload = ok(order_book_payload("ETH-USD"))

        book = await info.market_order_book("ETH-USD")

        assert transport.calls[0]["path"] == "info/markets/{market}/orderbook"
        assert book.market == "ETH-USD"
        assert book.bid[0].qty == "0.04852"
        assert book.ask[0].price == "43251.0"

    @pytest.mark.asyncio
    async def test_market_trades(self, transport, info):
        """Test trades path and decoding."""
        transport.payload = ok([trade_payload(), trade_payload(S="BUY", i=2)])

        trades = await info.market_trades("BTC-USD")

        assert transport.calls[0]["path"] == "info/markets/{market}/trades"
        assert [t.side.value for t in trades] == ["SELL", "BUY"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["market_stats", "market_order_book", "market_trades"])
    @pytest.mark.parametrize("market", ["btc-usd", "BTC USD", "BTC1-USD", "", None])
    async def test_malformed_symbols_never_sent(self, transport, info, method, market):
        """Test that malformed symbols are rejected locally."""
        with pytest.raises(InvalidInputError, match="Invalid market input."):
            await getattr(info, method)(market)

        assert transport.calls == []


class TestCandles:
    """Test the candles endpoint."""

    @pytest.mark.asyncio
    async def test_candles_request(self, transport, info):
        """Test path parameters and query."""
        transport.payload = ok([candle_payload()])

        candles = await info.candles("BTC-USD", CandleType.TRADES, "1h", 10)

        call = transport.calls[0]
        assert call["path"] == "info/candles/{market}/{candleType}"
        assert call["path_params"] == {"market": "BTC-USD", "candleType": "trades"}
        assert call["params"] == {"interval": "1h", "limit": 10}
        assert candles[0].volume == "12.345"

    @pytest.mark.asyncio
    async def test_candles_with_end_time(self, transport, info):
        """Test the optional end time and string candle types."""
        transport.payload = ok([])

        await info.candles("BTC-USD", "mark-prices", "1m", 5, end_time=END)

        call = transport.calls[0]
        assert call["path_params"]["candleType"] == "mark-prices"
        assert call["params"] == {"interval": "1m", "limit": 5, "endTime": END}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({"interval": ""}, "Interval is required."),
            ({"limit": 0}, "Limit must be a positive number."),
            ({"limit": True}, "Limit must be a positive number."),
            ({"candle_type": "volume"}, "Invalid candleType."),
            ({"end_time": -1}, "End time must be a positive number."),
        ],
    )
    async def test_candles_validation(self, transport, info, kwargs, message):
        """Test local argument validation."""
        args = {"market": "BTC-USD", "candle_type": "trades", "interval": "1h", "limit": 10}
        args.update(kwargs)

        with pytest.raises(InvalidInputError, match=message):
            await info.candles(**args)

        assert transport.calls == []


class TestFunding:
    """Test the funding history endpoint."""

    @pytest.mark.asyncio
    async def test_funding_with_pagination(self, transport, info):
        """Test that server pagination is passed through."""
        transport.payload = ok(
            [funding_rate_payload()], pagination={"cursor": 1784963886257016832, "count": 1}
        )

        history = await info.funding("BTC-USD", START, END, cursor=5, limit=100)

        call = transport.calls[0]
        assert call["path"] == "info/{market}/funding"
        assert call["params"] == {"startTime": START, "endTime": END, "cursor": 5, "limit": 100}
        assert history.data[0].funding_rate == "0.0001"
        assert history.pagination.cursor == 1784963886257016832

    @pytest.mark.asyncio
    async def test_missing_pagination_synthesized(self, transport, info):
        """Test the single-page fallback when pagination is absent."""
        transport.payload = ok([funding_rate_payload(), funding_rate_payload(T=END)])

        history = await info.funding("BTC-USD", START, END)

        assert transport.calls[0]["params"] == {"startTime": START, "endTime": END}
        assert history.pagination.cursor == 0
        assert history.pagination.count == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "start, end, kwargs, message",
        [
            (END, START, {}, "Start time must be before end time."),
            (START, START, {}, "Start time must be before end time."),
            (0, END, {}, "Start time must be a positive number."),
            (START, -5, {}, "End time must be a positive number."),
            (START, END, {"limit": 0}, "Limit must be between 1 and 10000."),
            (START, END, {"limit": 10001}, "Limit must be between 1 and 10000."),
            (START, END, {"cursor": -1}, "Cursor must be a non-negative number."),
        ],
    )
    async def test_funding_validation(self, transport, info, start, end, kwargs, message):
        """Test local argument validation."""
        with pytest.raises(InvalidInputError, match=message):
            await info.funding("BTC-USD", start, end, **kwargs)

        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_funding_limit_bounds_accepted(self, transport, info):
        """Test the inclusive limit bounds."""
        transport.payload = ok([])

        await info.funding("BTC-USD", START, END, limit=1)
        await info.funding("BTC-USD", START, END, limit=10000)

        assert len(transport.calls) == 2


class TestOpenInterest:
    """Test the open interest endpoint."""

    @pytest.mark.asyncio
    async def test_open_interest_request(self, transport, info):
        """Test query and decoding."""
        transport.payload = ok([open_interest_payload()])

        points = await info.open_interest("ETH-USD", "P1D", START, END, limit=300)

        call = transport.calls[0]
        assert call["path"] == "info/{market}/open-interests"
        assert call["params"] == {
            "interval": "P1D",
            "startTime": START,
            "endTime": END,
            "limit": 300,
        }
        assert points[0].open_interest_base == "2283.9"

    @pytest.mark.asyncio
    async def test_enum_interval(self, transport, info):
        """Test passing the interval as an enum member."""
        transport.payload = ok([])

        await info.open_interest("ETH-USD", OpenInterestInterval.HOUR, START, END)

        assert transport.calls[0]["params"]["interval"] == "P1H"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "interval, kwargs, message",
        [
            ("P1W", {}, "Interval must be P1H or P1D."),
            ("p1h", {}, "Interval must be P1H or P1D."),
            ("P1H", {"limit": 0}, "Limit must be between 1 and 300."),
            ("P1H", {"limit": 301}, "Limit must be between 1 and 300."),
        ],
    )
    async def test_open_interest_validation(self, transport, info, interval, kwargs, message):
        """Test local argument validation."""
        with pytest.raises(InvalidInputError, match=message):
            await info.open_interest("ETH-USD", interval, START, END, **kwargs)

        assert transport.calls == []


class TestEnvelopeHandling:
    """Test how envelopes turn into results or errors."""

    @pytest.mark.asyncio
    async def test_error_code_outside_endpoint_family(self, transport, info):
        """Test that a known code from another family is still an ApiError."""
        transport.payload = error("MarketNotFound", "Market not found")

        with pytest.raises(ApiError) as exc_info:
            await info.candles("BTC-USD", "trades", "1h", 10)

        assert exc_info.value.code == "MarketNotFound"

    @pytest.mark.asyncio
    async def test_unlisted_error_code(self, transport, info):
        """Test that a code no family lists yet is still an ApiError."""
        transport.payload = error("RateLimited", "slow down")

        with pytest.raises(ApiError) as exc_info:
            await info.market_trades("BTC-USD")

        assert exc_info.value.code == "RateLimited"
        assert exc_info.value.message == "slow down"

    @pytest.mark.asyncio
    async def test_error_envelope_without_message(self, transport, info):
        """Test that a malformed ERROR envelope is an unexpected response."""
        transport.payload = {"status": "ERROR", "error": {"code": "RateLimited"}}

        with pytest.raises(UnexpectedResponseError):
            await info.market_trades("BTC-USD")

    @pytest.mark.asyncio
    async def test_malformed_ok_payload(self, transport, info):
        """Test that an OK envelope with a bad record is rejected."""
        transport.payload = ok([trade_payload(p=43250.5)])

        with pytest.raises(UnexpectedResponseError) as exc_info:
            await info.market_trades("BTC-USD")

        assert exc_info.value.payload == transport.payload
        assert exc_info.value.validation_error is not None
        assert str(exc_info.value).startswith("Unexpected response format: ")

    @pytest.mark.asyncio
    async def test_non_envelope_payload(self, transport, info):
        """Test a body that is not an envelope at all."""
        transport.payload = {"foo": 1}

        with pytest.raises(UnexpectedResponseError, match='"foo": 1'):
            await info.markets()

    @pytest.mark.asyncio
    async def test_errors_are_logged(self):
        """Test warnings for server errors."""
        stream = StringIO()
        transport = FakeTransport(error("NOT_FOUND", "Not here"))
        info = InfoClient(transport, logger=ConsoleLogger(level=LogLevel.WARN, stream=stream))

        with pytest.raises(ApiError):
            await info.market_stats("BTC-USD")

        assert "WARN: API error NOT_FOUND: Not here" in stream.getvalue()


class TestCancellation:
    """Test signal propagation."""

    @pytest.mark.asyncio
    async def test_signal_forwarded(self, transport, info):
        """Test that the signal reaches the transport."""
        transport.payload = ok(order_book_payload())
        signal = asyncio.Event()

        await info.market_order_book("BTC-USD", signal=signal)

        assert transport.calls[0]["signal"] is signal

    @pytest.mark.asyncio
    async def test_pre_aborted_signal(self, transport, info):
        """Test that a set signal rejects without a round trip."""
        signal = asyncio.Event()
        signal.set()

        with pytest.raises(RequestAbortedError):
            await info.market_trades("BTC-USD", signal=signal)

        assert transport.calls == []
