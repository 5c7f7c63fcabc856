"""
Type definitions for the Extended SDK.

Records are immutable pydantic models validated strictly against the wire
format: decimal quantities stay exact strings and timestamps are integer
epoch milliseconds. Attribute names are snake_case; the wire names are kept
as aliases, so ``Candle.model_validate({"o": "1.5", ...}).open == "1.5"``
and ``model_dump(by_alias=True)`` gives the wire form back.
"""

from enum import Enum
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

# Exact decimal quantity, e.g. "43250.5". Never a float.
DecimalString = StrictStr

EpochMillis = Annotated[int, Field(strict=True, gt=0)]
NonNegativeInt = Annotated[int, Field(strict=True, ge=0)]
PositiveInt = Annotated[int, Field(strict=True, gt=0)]


# ============================================================================
# Enums
# ============================================================================


class MarketStatus(str, Enum):
    """Market status."""

    ACTIVE = "ACTIVE"
    REDUCE_ONLY = "REDUCE_ONLY"
    DELISTED = "DELISTED"
    PRELISTED = "PRELISTED"
    DISABLED = "DISABLED"


class TradeSide(str, Enum):
    """Side of the taker in a trade."""

    BUY = "BUY"
    SELL = "SELL"


class TradeType(str, Enum):
    """Trade type."""

    TRADE = "TRADE"
    LIQUIDATION = "LIQUIDATION"
    DELEVERAGE = "DELEVERAGE"


class CandleType(str, Enum):
    """Price type a candle is built from."""

    TRADES = "trades"
    MARK_PRICES = "mark-prices"
    INDEX_PRICES = "index-prices"


class CandleInterval(str, Enum):
    """Common candle intervals. The API accepts other interval strings too."""

    ONE_MINUTE = "1m"
    FIVE_MINUTES = "5m"
    FIFTEEN_MINUTES = "15m"
    THIRTY_MINUTES = "30m"
    ONE_HOUR = "1h"
    FOUR_HOURS = "4h"
    ONE_DAY = "1d"
    ONE_WEEK = "1w"
    ONE_MONTH = "1M"


class OpenInterestInterval(str, Enum):
    """Open interest sampling interval."""

    HOUR = "P1H"
    DAY = "P1D"


# ============================================================================
# Base
# ============================================================================


class Record(BaseModel):
    """Base class for immutable API records."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )


# ============================================================================
# Market Models
# ============================================================================


class MarketStats(Record):
    """Trading statistics of a market."""

    daily_volume: DecimalString
    daily_volume_base: DecimalString
    daily_price_change: Optional[DecimalString] = None
    daily_price_change_percentage: DecimalString
    daily_low: DecimalString
    daily_high: DecimalString
    last_price: DecimalString
    ask_price: DecimalString
    bid_price: DecimalString
    mark_price: DecimalString
    index_price: DecimalString
    # Most recent funding rate, recalculated every minute
    funding_rate: DecimalString
    # Timestamp of the next funding update
    next_funding_rate: EpochMillis
    open_interest: DecimalString
    open_interest_base: DecimalString


class DeleverageLevel(Record):
    """Auto-deleveraging level, from 1 (lowest risk) to 4 (highest risk)."""

    level: Annotated[int, Field(strict=True, ge=1, le=4)]
    ranking_lower_bound: DecimalString


class DeleverageLevels(Record):
    """Auto-deleveraging levels for short and long positions."""

    short_positions: list[DeleverageLevel]
    long_positions: list[DeleverageLevel]


class MarketStatsWithDeleverage(MarketStats):
    """Market statistics as returned by the single-market stats endpoint."""

    daily_price_change: DecimalString
    deleverage_levels: DeleverageLevels


class TradingConfig(Record):
    """Trading limits of a market."""

    min_order_size: DecimalString
    min_order_size_change: DecimalString
    min_price_change: DecimalString
    max_market_order_value: DecimalString
    max_limit_order_value: DecimalString
    max_position_value: DecimalString
    max_leverage: DecimalString
    max_num_orders: DecimalString
    limit_price_cap: DecimalString
    limit_price_floor: DecimalString


class L2Config(Record):
    """StarkEx settlement configuration of a market."""

    type: Literal["STARKX"]
    collateral_id: StrictStr
    # Quantums per human-readable unit of the collateral asset
    collateral_resolution: PositiveInt
    synthetic_id: StrictStr
    synthetic_resolution: PositiveInt


class Market(Record):
    """Market information."""

    name: StrictStr
    asset_name: StrictStr
    asset_precision: NonNegativeInt
    collateral_asset_name: StrictStr
    collateral_asset_precision: NonNegativeInt
    active: StrictBool
    status: MarketStatus
    market_stats: MarketStats
    trading_config: TradingConfig
    l2_config: L2Config = Field(alias="l2Config")
    visible_on_ui: StrictBool
    created_at: EpochMillis


class OrderBookEntry(Record):
    """Order book price level."""

    qty: DecimalString
    price: DecimalString


class MarketOrderBook(Record):
    """Order book snapshot of a market."""

    market: StrictStr
    bid: list[OrderBookEntry]
    ask: list[OrderBookEntry]


class MarketTrade(Record):
    """Public trade."""

    id: StrictInt = Field(alias="i")
    market: StrictStr = Field(alias="m")
    side: TradeSide = Field(alias="S")
    trade_type: TradeType = Field(alias="tT")
    timestamp: EpochMillis = Field(alias="T")
    price: DecimalString = Field(alias="p")
    quantity: DecimalString = Field(alias="q")


# ============================================================================
# Time Series Models
# ============================================================================


class Candle(Record):
    """OHLCV candle."""

    open: DecimalString = Field(alias="o")
    close: DecimalString = Field(alias="c")
    high: DecimalString = Field(alias="h")
    low: DecimalString = Field(alias="l")
    # Only trade-price candles carry volume
    volume: Optional[DecimalString] = Field(default=None, alias="v")
    timestamp: StrictInt = Field(alias="T")


class FundingRate(Record):
    """Funding rate applied at a point in time."""

    market: StrictStr = Field(alias="m")
    timestamp: StrictInt = Field(alias="T")
    funding_rate: DecimalString = Field(alias="f")


class Pagination(Record):
    """Offset pagination block of the funding history endpoint."""

    cursor: NonNegativeInt
    count: NonNegativeInt


class FundingHistory(Record):
    """One page of funding history."""

    data: list[FundingRate]
    pagination: Pagination


class OpenInterest(Record):
    """Open interest at a point in time."""

    # In the collateral asset (USD)
    open_interest: DecimalString = Field(alias="i")
    # In the synthetic asset
    open_interest_base: DecimalString = Field(alias="I")
    timestamp: StrictInt = Field(alias="t")
