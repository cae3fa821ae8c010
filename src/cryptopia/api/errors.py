"""Exception taxonomy and exchange error-code table."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping


class CryptopiaError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, *, description: str | None = None, cause: BaseException | None = None):
        super().__init__(message)
        self.description = description
        self.cause = cause


class MissingCredentialsError(CryptopiaError):
    """Private request attempted without an API key and secret."""


class InvalidCredentialsError(CryptopiaError):
    """API secret is not valid base64."""


class InvalidParameterError(CryptopiaError):
    """Request parameters are not a key-value mapping."""


class TransportError(CryptopiaError):
    """Connection failure or timeout."""


class HttpStatusError(CryptopiaError):
    """Non-2xx HTTP response."""

    def __init__(self, status_code: int, message: str, *, description: str | None = None):
        super().__init__(message, description=description)
        self.status_code = status_code


class ResponseDecodeError(CryptopiaError):
    """Response body is not valid JSON or not the expected shape."""

    def __init__(
        self,
        message: str,
        *,
        body: Any = None,
        description: str | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message, description=description, cause=cause)
        self.body = body


class RemoteApiError(CryptopiaError):
    """Exchange returned an ``error_code`` in the response body."""

    def __init__(self, code: int | str, message: str, *, description: str | None = None):
        super().__init__(message, description=description)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message


class PublicApiError(CryptopiaError):
    """Public endpoint envelope carried an ``Error`` message."""


ERROR_CODES: Mapping[int, str] = MappingProxyType({
    10000: "Required parameter can not be null",
    10001: "Requests are too frequent",
    10002: "System Error",
    10003: "Restricted list request, please try again later",
    10004: "IP restriction",
    10005: "Key does not exist",
    10006: "User does not exist",
    10007: "Signatures do not match",
    10008: "Illegal parameter",
    10009: "Order does not exist",
    10010: "Insufficient balance",
    10011: "Order is less than minimum trade amount",
    10012: "Unsupported symbol (not btc_usd or ltc_usd)",
    10013: "This interface only accepts https requests",
    10014: "Order price must be between 0 and 1,000,000",
    10015: "Order price differs from current market price too much",
    10016: "Insufficient coins balance",
    10017: "API authorization error",
    10026: "Loan (including reserved loan) and margin cannot be withdrawn",
    10027: "Cannot withdraw within 24 hrs of authentication information modification",
    10028: "Withdrawal amount exceeds daily limit",
    10029: "Account has unpaid loan, please cancel/pay off the loan before withdraw",
    10031: "Deposits can only be withdrawn after 6 confirmations",
    10032: "Please enabled phone/google authenticator",
    10033: "Fee higher than maximum network transaction fee",
    10034: "Fee lower than minimum network transaction fee",
    10035: "Insufficient BTC/LTC",
    10036: "Withdrawal amount too low",
    10037: "Trade password not set",
    10040: "Withdrawal cancellation fails",
    10041: "Withdrawal address not approved",
    10042: "Admin password error",
    10100: "User account frozen",
    10216: "Non-available API",
    503: "Too many requests (Http)",
})


def map_error_message(error_code: Any) -> str:
    """Map a Cryptopia error code to its message.

    Args:
        error_code: Code from the ``error_code`` response field (int or numeric string)

    Returns:
        Human-readable message, or an "unknown code" message naming the code
    """
    try:
        message = ERROR_CODES.get(int(error_code))
    except (TypeError, ValueError):
        message = None
    if not message:
        return f"Unknown Cryptopia error code: {error_code}"
    return message
