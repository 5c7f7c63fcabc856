"""Extended exchange SDK for Python."""

# Main unified client
from .sdk import ExtendedClient

# Individual clients
from .info import InfoClient
from .transports import HttpTransport, RequestTransport

# Services
from .config import (
    DEFAULT_TIMEOUT_MS,
    MAINNET_API_URL,
    TESTNET_API_URL,
    ServerConfig,
)
from .logger import Logger, ConsoleLogger, NoopLogger, LogLevel

# Types
from .types import (
    MarketStatus,
    TradeSide,
    TradeType,
    CandleType,
    CandleInterval,
    OpenInterestInterval,
    MarketStats,
    DeleverageLevel,
    DeleverageLevels,
    MarketStatsWithDeleverage,
    TradingConfig,
    L2Config,
    Market,
    OrderBookEntry,
    MarketOrderBook,
    MarketTrade,
    Candle,
    FundingRate,
    Pagination,
    FundingHistory,
    OpenInterest,
)
from .error_codes import (
    GeneralErrorCode,
    MarketAssetAccountErrorCode,
    LeverageErrorCode,
    StarkExErrorCode,
    OrderErrorCode,
    AccountErrorCode,
    WithdrawalErrorCode,
    TransferErrorCode,
    ReferralErrorCode,
)
from .schemas import ParseResult, safe_parse

# Exceptions
from .exceptions import (
    ExtendedError,
    InvalidInputError,
    TransportError,
    HttpRequestError,
    NetworkError,
    RequestTimeoutError,
    RequestAbortedError,
    ApiError,
    UnexpectedResponseError,
)

__all__ = [
    # Main client
    "ExtendedClient",
    # Individual clients
    "InfoClient",
    "HttpTransport",
    "RequestTransport",
    # Configuration and logging
    "ServerConfig",
    "MAINNET_API_URL",
    "TESTNET_API_URL",
    "DEFAULT_TIMEOUT_MS",
    "Logger",
    "ConsoleLogger",
    "NoopLogger",
    "LogLevel",
    # Enums
    "MarketStatus",
    "TradeSide",
    "TradeType",
    "CandleType",
    "CandleInterval",
    "OpenInterestInterval",
    # Domain types
    "MarketStats",
    "DeleverageLevel",
    "DeleverageLevels",
    "MarketStatsWithDeleverage",
    "TradingConfig",
    "L2Config",
    "Market",
    "OrderBookEntry",
    "MarketOrderBook",
    "MarketTrade",
    "Candle",
    "FundingRate",
    "Pagination",
    "FundingHistory",
    "OpenInterest",
    # Error codes
    "GeneralErrorCode",
    "MarketAssetAccountErrorCode",
    "LeverageErrorCode",
    "StarkExErrorCode",
    "OrderErrorCode",
    "AccountErrorCode",
    "WithdrawalErrorCode",
    "TransferErrorCode",
    "ReferralErrorCode",
    # Validation
    "ParseResult",
    "safe_parse",
    # Exceptions
    "ExtendedError",
    "InvalidInputError",
    "TransportError",
    "HttpRequestError",
    "NetworkError",
    "RequestTimeoutError",
    "RequestAbortedError",
    "ApiError",
    "UnexpectedResponseError",
]

__version__ = "0.1.0"
