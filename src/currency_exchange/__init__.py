__version__ = "0.0.1"

from currency_exchange.domain.monetary import (
    Currency,
    CurrencyPair,
    ExchangeRateTable,
    InvalidAmountError,
    InvalidRateError,
    MismatchedCurrencyError,
    MonetaryError,
    Money,
    RateNotFoundError,
)

__all__ = [
    "Currency",
    "CurrencyPair",
    "ExchangeRateTable",
    "Money",
    "MonetaryError",
    "InvalidRateError",
    "RateNotFoundError",
    "InvalidAmountError",
    "MismatchedCurrencyError",
]
