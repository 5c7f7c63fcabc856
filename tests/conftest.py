"""Shared fixtures and wire payload factories."""

import asyncio
from typing import Any, Optional

import pytest

from extended_sdk import InfoClient, RequestTransport
from extended_sdk.transports import raise_if_aborted


class FakeTransport(RequestTransport):
    """In-memory transport returning canned payloads and recording calls."""

    def __init__(self, payload: Any = None):
        self.payload = payload
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    async def request(
        self,
        method,
        path,
        params=None,
        path_params=None,
        signal: Optional[asyncio.Event] = None,
    ):
        raise_if_aborted(signal)
        self.calls.append(
            {
                "method": method,
                "path": path,
                "params": params,
                "path_params": path_params,
                "signal": signal,
            }
        )
        return self.payload

    async def close(self) -> None:
        self.closed = True


# ============================================================================
# Payload factories
# ============================================================================


def ok(data: Any, **extra: Any) -> dict[str, Any]:
    return {"status": "OK", "data": data, **extra}


def error(code: str, message: str = "Something went wrong") -> dict[str, Any]:
    return {"status": "ERROR", "error": {"code": code, "message": message}}


def market_stats_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "dailyVolume": "123456789.12",
        "dailyVolumeBase": "2875.431",
        "dailyPriceChange": "-512.5",
        "dailyPriceChangePercentage": "-0.0117",
        "dailyLow": "42800.0",
        "dailyHigh": "44100.5",
        "lastPrice": "43250.5",
        "askPrice": "43251.0",
        "bidPrice": "43250.0",
        "markPrice": "43250.7",
        "indexPrice": "43249.9",
        "fundingRate": "0.000013",
        "nextFundingRate": 1701565200000,
        "openInterest": "98765432.1",
        "openInterestBase": "2283.9",
    }
    payload.update(overrides)
    return payload


def market_stats_with_deleverage_payload(**overrides: Any) -> dict[str, Any]:
    payload = market_stats_payload(
        deleverageLevels={
            "shortPositions": [
                {"level": 1, "rankingLowerBound": "0.0"},
                {"level": 2, "rankingLowerBound": "0.25"},
            ],
            "longPositions": [
                {"level": 1, "rankingLowerBound": "0.0"},
                {"level": 4, "rankingLowerBound": "0.9"},
            ],
        }
    )
    payload.update(overrides)
    return payload


def market_payload(name: str = "BTC-USD", **overrides: Any) -> dict[str, Any]:
    payload = {
        "name": name,
        "assetName": name.split("-")[0],
        "assetPrecision": 5,
        "collateralAssetName": "USD",
        "collateralAssetPrecision": 6,
        "active": True,
        "status": "ACTIVE",
        "marketStats": market_stats_payload(),
        "tradingConfig": {
            "minOrderSize": "0.0001",
            "minOrderSizeChange": "0.00001",
            "minPriceChange": "1",
            "maxMarketOrderValue": "1000000",
            "maxLimitOrderValue": "5000000",
            "maxPositionValue": "10000000",
            "maxLeverage": "50.00",
            "maxNumOrders": "200",
            "limitPriceCap": "0.05",
            "limitPriceFloor": "0.05",
        },
        "l2Config": {
            "type": "STARKX",
            "collateralId": "0x31857064564ed0ff978e687456963cba09c2c6985d8f9300a1de4962fafa054",
            "collateralResolution": 1000000,
            "syntheticId": "0x4254432d3600000000000000000000",
            "syntheticResolution": 1000000,
        },
        "visibleOnUi": True,
        "createdAt": 1701563440000,
    }
    payload.update(overrides)
    return payload


def order_book_payload(market: str = "BTC-USD") -> dict[str, Any]:
    return {
        "market": market,
        "bid": [{"qty": "0.04852", "price": "43250.0"}],
        "ask": [{"qty": "0.1", "price": "43251.0"}],
    }


def trade_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "i": 1844000421446684673,
        "m": "BTC-USD",
        "S": "SELL",
        "tT": "TRADE",
        "T": 1701563440000,
        "p": "43250.5",
        "q": "0.01",
    }
    payload.update(overrides)
    return payload


def candle_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "o": "43000.0",
        "c": "43250.5",
        "h": "43300.0",
        "l": "42950.0",
        "v": "12.345",
        "T": 1701561600000,
    }
    payload.update(overrides)
    return payload


def funding_rate_payload(**overrides: Any) -> dict[str, Any]:
    payload = {"m": "BTC-USD", "T": 1701561600000, "f": "0.0001"}
    payload.update(overrides)
    return payload


def open_interest_payload(**overrides: Any) -> dict[str, Any]:
    payload = {"i": "98765432.1", "I": "2283.9", "t": 1701561600000}
    payload.update(overrides)
    return payload


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def info(transport: FakeTransport) -> InfoClient:
    return InfoClient(transport)
