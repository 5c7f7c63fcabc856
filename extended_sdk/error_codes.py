"""
Extended API error codes.

Codes are grouped in families; each endpoint may only return the union of
the families relevant to it.
"""

from enum import Enum
from typing import Union


class GeneralErrorCode(str, Enum):
    """General HTTP error codes."""

    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    UNPROCESSABLE_ENTITY = "UNPROCESSABLE_ENTITY"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class MarketAssetAccountErrorCode(str, Enum):
    """Market, asset and account error codes."""

    ASSET_NOT_FOUND = "AssetNotFound"
    MARKET_NOT_FOUND = "MarketNotFound"
    MARKET_DISABLED = "MarketDisabled"
    MARKET_GROUP_NOT_FOUND = "MarketGroupNotFound"
    ACCOUNT_NOT_FOUND = "AccountNotFound"
    NOT_SUPPORTED_INTERVAL = "NotSupportedInterval"
    UNHANDLED_ERROR = "UnhandledError"
    CLIENT_NOT_FOUND = "ClientNotFound"
    ACTION_NOT_ALLOWED = "ActionNotAllowed"
    MAINTENANCE_MODE = "MaintenanceMode"
    POST_ONLY_MODE = "PostOnlyMode"
    REDUCE_ONLY_MODE = "ReduceOnlyMode"
    INVALID_PERCENTAGE = "InvalidPercentage"
    MARKET_REDUCE_ONLY = "MarketReduceOnly"


class LeverageErrorCode(str, Enum):
    """Leverage update error codes."""

    BELOW_MIN_LEVERAGE = "InvalidLeverageBelowMinLeverage"
    EXCEEDS_MAX_LEVERAGE = "InvalidLeverageExceedsMaxLeverage"
    MAX_POSITION_VALUE_EXCEEDED = "InvalidLeverageMaxPositionValueExceeded"
    INSUFFICIENT_MARGIN = "InvalidLeverageInsufficientMargin"
    INVALID_PRECISION = "InvalidLeverageInvalidPrecision"


class StarkExErrorCode(str, Enum):
    """StarkEx signature error codes."""

    INVALID_PUBLIC_KEY = "InvalidStarkExPublicKey"
    INVALID_SIGNATURE = "InvalidStarkExSignature"
    INVALID_VAULT = "InvalidStarkExVault"


class OrderErrorCode(str, Enum):
    """Order management error codes."""

    QTY_LESS_THAN_MIN_TRADE_SIZE = "OrderQtyLessThanMinTradeSize"
    QTY_WRONG_SIZE_INCREMENT = "InvalidQtyWrongSizeIncrement"
    VALUE_EXCEEDS_MAX_ORDER_VALUE = "OrderValueExceedsMaxOrderValue"
    INVALID_QTY_PRECISION = "InvalidQtyPrecision"
    PRICE_WRONG_PRICE_MOVEMENT = "InvalidPriceWrongPriceMovement"
    INVALID_PRICE_PRECISION = "InvalidPricePrecision"
    MAX_OPEN_ORDERS_NUMBER_EXCEEDED = "MaxOpenOrdersNumberExceeded"
    MAX_POSITION_VALUE_EXCEEDED = "MaxPositionValueExceeded"
    INVALID_TRADING_FEES = "InvalidTradingFees"
    INVALID_POSITION_TPSL_QTY = "InvalidPositionTpslQty"
    MISSING_ORDER_PRICE = "MissingOrderPrice"
    MISSING_TPSL_TRIGGER = "MissingTpslTrigger"
    NOT_ALLOWED_ORDER_TYPE = "NotAllowedOrderType"
    INVALID_ORDER_PARAMETERS = "InvalidOrderParameters"
    DUPLICATE_ORDER = "DuplicateOrder"
    INVALID_ORDER_EXPIRATION = "InvalidOrderExpiration"
    REDUCE_ONLY_SIZE_EXCEEDS_POSITION_SIZE = "ReduceOnlyOrderSizeExceedsPositionSize"
    REDUCE_ONLY_POSITION_IS_MISSING = "ReduceOnlyOrderPositionIsMissing"
    REDUCE_ONLY_POSITION_SAME_SIDE = "ReduceOnlyOrderPositionSameSide"
    MARKET_ORDER_MUST_BE_IOC = "MarketOrderMustBeIOC"
    COST_EXCEEDS_BALANCE = "OrderCostExceedsBalance"
    INVALID_PRICE_AMOUNT = "InvalidPriceAmount"
    EDIT_ORDER_NOT_FOUND = "EditOrderNotFound"
    MISSING_CONDITIONAL_TRIGGER = "MissingConditionalTrigger"
    POST_ONLY_ON_CONDITIONAL_MARKET_ORDER = "PostOnlyCantBeOnConditionalMarketOrder"
    NON_REDUCE_ONLY_ORDERS_NOT_ALLOWED = "NonReduceOnlyOrdersNotAllowed"
    TWAP_ORDER_MUST_BE_GTT = "TwapOrderMustBeGTT"
    OPEN_LOSS_EXCEEDS_EQUITY = "OpenLossExceedsEquity"
    TPSL_OPEN_LOSS_EXCEEDS_EQUITY = "TPSLOpenLossExceedsEquity"


class AccountErrorCode(str, Enum):
    """General account error codes."""

    ACCOUNT_NOT_SELECTED = "AccountNotSelected"


class WithdrawalErrorCode(str, Enum):
    """Withdrawal error codes."""

    AMOUNT_MUST_BE_POSITIVE = "WithdrawalAmountMustBePositive"
    DESCRIPTION_TOO_LONG = "WithdrawalDescriptionToLong"
    REQUEST_DOES_NOT_MATCH_SETTLEMENT = "WithdrawalRequestDoesNotMatchSettlement"
    ETH_ADDRESS_IS_NOT_VALID = "WithdrawalEthAddressIsNotValid"
    EXPIRATION_TIME_IS_TOO_SOON = "WithdrawalExpirationTimeIsTooSoon"
    INVALID_ASSET = "WithdrawalInvalidAsset"
    ETH_ADDRESS_MUST_BE_ATTACHED_TO_CLIENT = "WithdrawalEthAddressMustBeAttachedToClient"
    BLOCKED_FOR_ACCOUNT = "WithdrawalBlockedForAccount"
    ACCOUNT_DOES_NOT_BELONG_TO_USER = "WithdrawalAccountDoesNotBelongToUser"
    DISABLED = "WithdrawalDisabled"
    TRANSFER_FEE_IS_TOO_LOW = "WithdrawalTransferFeeIsTooLow"
    STARKEX_TRANSFER_INVALID_AMOUNT = "WithdrawalStarkexTransferInvalidAmount"
    STARKEX_TRANSFER_INVALID_EXPIRATION_TIME = "WithdrawalStarkexTransferInvalidExpirationTime"
    STARKEX_TRANSFER_INVALID_RECEIVER_POSITION_ID = (
        "WithdrawalStarkexTransferInvalidReceiverPositionId"
    )
    STARKEX_TRANSFER_INVALID_RECEIVER_PUBLIC_KEY = (
        "WithdrawalStarkexTransferInvalidReceiverPublicKey"
    )
    STARKEX_TRANSFER_INVALID_SENDER_POSITION_ID = "WithdrawalStarkexTransferInvalidSenderPositionId"
    STARKEX_TRANSFER_INVALID_SENDER_PUBLIC_KEY = "WithdrawalStarkexTransferInvalidSenderPublicKey"
    STARKEX_TRANSFER_INVALID_SIGNATURE = "WithdrawalStarkexTransferInvalidSignature"
    DAILY_LIMIT_EXCEED = "WithdrawalDailyLimitExceed"
    REJECTED_TRANSFER = "WithdrawalRejectedTransfer"
    FAILED_RISK_CONTROLS = "WithdrawalFailedRiskControls"
    IS_NOT_ALLOWED = "WithdrawalIsNotAllowed"
    NOT_ALLOWED_FOR_INSTITUTIONAL_CLIENT = "WithdrawalIsNotAllowedForInstitutionalClient"


class TransferErrorCode(str, Enum):
    """Transfer error codes."""

    INVALID_VAULT_TRANSFER_AMOUNT = "InvalidVaultTransferAmount"


class ReferralErrorCode(str, Enum):
    """Referral code error codes."""

    CODE_ALREADY_EXIST = "ReferralCodeAlreadyExist"
    CODE_INVALID = "ReferralCodeInvalid"
    PROGRAM_IS_NOT_ENABLED = "ReferralProgramIsNotEnabled"
    CODE_ALREADY_APPLIED = "ReferralCodeAlreadyApplied"


# Returned by the markets, market stats, order book and trades endpoints
MarketErrorCode = Union[GeneralErrorCode, MarketAssetAccountErrorCode]

ExtendedErrorCode = Union[
    GeneralErrorCode,
    MarketAssetAccountErrorCode,
    LeverageErrorCode,
    StarkExErrorCode,
    OrderErrorCode,
    AccountErrorCode,
    WithdrawalErrorCode,
    TransferErrorCode,
    ReferralErrorCode,
]
