"""Errors raised by the monetary domain.

All of them derive from `ValueError`, so callers that only care about "bad input"
can keep catching `ValueError`.
"""


class MonetaryError(ValueError):
    """Base class for all monetary domain errors."""

    pass


class InvalidRateError(MonetaryError):
    """Raised when an exchange rate is not a finite positive number."""

    pass


class RateNotFoundError(MonetaryError):
    """Raised when no rate is registered for the requested ordered currency pair."""

    pass


class InvalidAmountError(MonetaryError):
    """Raised when a Money amount is negative or not a finite number."""

    pass


class MismatchedCurrencyError(MonetaryError):
    """Raised when ordering Money values that are in different currencies."""

    pass
