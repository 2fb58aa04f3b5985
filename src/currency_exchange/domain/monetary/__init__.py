"""Monetary domain package.

This package contains the fixed set of supported currencies, the exchange rate table
and the immutable Money value that converts between currencies using that table.
"""

from currency_exchange.domain.monetary.currency import Currency
from currency_exchange.domain.monetary.currency_pair import CurrencyPair
from currency_exchange.domain.monetary.errors import (
    InvalidAmountError,
    InvalidRateError,
    MismatchedCurrencyError,
    MonetaryError,
    RateNotFoundError,
)
from currency_exchange.domain.monetary.exchange_rate_table import ExchangeRateTable
from currency_exchange.domain.monetary.money import Money

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
