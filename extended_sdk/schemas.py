"""
Response envelopes and per-endpoint validators.

Every endpoint answers with one of two envelopes, discriminated by
``status``::

    {"status": "OK", "data": ...}
    {"status": "ERROR", "error": {"code": ..., "message": ...}}

Each endpoint validator is a pydantic ``TypeAdapter`` over that tagged
union. ``safe_parse`` reports validation failures as a value instead of
raising, so callers decide whether a bad payload is fatal.
"""

from dataclasses import dataclass
from typing import Annotated, Any, Generic, Literal, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter, ValidationError

from .error_codes import ExtendedErrorCode, GeneralErrorCode, MarketErrorCode
from .types import (
    Candle,
    FundingRate,
    Market,
    MarketOrderBook,
    MarketStatsWithDeleverage,
    MarketTrade,
    OpenInterest,
    Pagination,
)

DataT = TypeVar("DataT")
CodeT = TypeVar("CodeT")
T = TypeVar("T")


class Envelope(BaseModel):
    """Base class for response envelopes."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class SuccessResponse(Envelope, Generic[DataT]):
    """``OK`` envelope."""

    status: Literal["OK"]
    data: DataT


class FundingHistorySuccessResponse(SuccessResponse[list[FundingRate]]):
    """``OK`` envelope of the funding history endpoint."""

    pagination: Optional[Pagination] = None


class ErrorDetail(Envelope, Generic[CodeT]):
    """Error reported by the server."""

    code: CodeT
    message: StrictStr


class ErrorResponse(Envelope, Generic[CodeT]):
    """``ERROR`` envelope."""

    status: Literal["ERROR"]
    error: ErrorDetail[CodeT]


def response_schema(success_model: type, code_type: Any) -> TypeAdapter:
    """
    Build the discriminated ``OK``/``ERROR`` validator for one endpoint.

    Args:
        success_model: Model of the ``OK`` envelope
        code_type: Error code enum (or union of enums) the endpoint may return

    Returns:
        TypeAdapter validating either envelope variant
    """
    envelope = Annotated[
        Union[success_model, ErrorResponse[code_type]],
        Field(discriminator="status"),
    ]
    return TypeAdapter(envelope)


# ============================================================================
# Endpoint Validators
# ============================================================================

MARKETS_RESPONSE = response_schema(SuccessResponse[list[Market]], MarketErrorCode)

MARKET_STATS_RESPONSE = response_schema(
    SuccessResponse[MarketStatsWithDeleverage], MarketErrorCode
)

MARKET_ORDER_BOOK_RESPONSE = response_schema(SuccessResponse[MarketOrderBook], MarketErrorCode)

MARKET_TRADES_RESPONSE = response_schema(SuccessResponse[list[MarketTrade]], MarketErrorCode)

CANDLES_RESPONSE = response_schema(SuccessResponse[list[Candle]], GeneralErrorCode)

FUNDING_HISTORY_RESPONSE = response_schema(FundingHistorySuccessResponse, GeneralErrorCode)

OPEN_INTEREST_RESPONSE = response_schema(SuccessResponse[list[OpenInterest]], GeneralErrorCode)

# Any error envelope carrying a known code, whatever the endpoint
ERROR_RESPONSE = TypeAdapter(ErrorResponse[ExtendedErrorCode])

# Well-formed error envelope with a code no family lists yet
UNKNOWN_ERROR_RESPONSE = TypeAdapter(ErrorResponse[StrictStr])


# ============================================================================
# Non-raising validation
# ============================================================================


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of ``safe_parse``: either ``data`` or ``error`` is set."""

    success: bool
    data: Optional[T] = None
    error: Optional[ValidationError] = None


def safe_parse(schema: TypeAdapter, payload: Any) -> ParseResult:
    """Validate ``payload`` against ``schema`` without raising."""
    try:
        return ParseResult(success=True, data=schema.validate_python(payload))
    except ValidationError as exc:
        return ParseResult(success=False, error=exc)
