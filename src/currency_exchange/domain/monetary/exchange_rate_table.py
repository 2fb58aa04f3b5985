from __future__ import annotations

import logging
import math
from collections.abc import Mapping

from currency_exchange.domain.monetary.currency import Currency
from currency_exchange.domain.monetary.currency_pair import CurrencyPair
from currency_exchange.domain.monetary.errors import InvalidRateError, RateNotFoundError
from currency_exchange.utils.float_tools import FloatLike, as_finite_float

logger = logging.getLogger(__name__)


class ExchangeRateTable:
    """Table of exchange rates keyed by ordered currency pairs.

    Behavior:
    - Setting a rate for (A, B) always stores the inverse rate for (B, A) in the same call.
    - Converting a currency into itself always uses rate 1.0; identity pairs are never stored.
    - Only stored rates are honored. There is no routing through other currencies, so if
      (A, B) was never set (directly or as an inverse), the lookup fails.
    - Entries are never removed; setting an existing pair overwrites both directions.

    Notes:
    - No internal locking. Populate the table first, then share it with readers.

    Example:
        table = ExchangeRateTable()
        table.set_rate(Currency.BGN, Currency.EUR, 0.511292)
        table.get_rate(Currency.EUR, Currency.BGN)  # 1 / 0.511292
    """

    # region Init

    def __init__(self) -> None:
        self._rates: dict[CurrencyPair, float] = {}

    # endregion

    # region Rates

    def set_rate(self, from_currency: Currency, to_currency: Currency, rate: FloatLike) -> None:
        """Store $rate for ($from_currency -> $to_currency) and its inverse.

        Args:
            from_currency (Currency): Currency converted from.
            to_currency (Currency): Currency converted to.
            rate: Positive multiplicative factor; amount_in_to = amount_in_from * rate.

        Raises:
            TypeError: If a currency is not a Currency instance.
            InvalidRateError: If $rate is not a finite positive number.
        """
        pair = self._make_pair("set_rate", from_currency, to_currency)
        value = self._validate_rate("set_rate", rate)
        self._store(pair, value)

    def set_rates(self, rates: Mapping[CurrencyPair, FloatLike]) -> None:
        """Store many rates at once.

        All pairs and rates are validated first; if any of them is invalid, nothing is stored.

        Args:
            rates: Mapping of pair to rate. Each entry behaves like one `set_rate` call.

        Raises:
            TypeError: If a key is not a CurrencyPair of Currency instances.
            InvalidRateError: If any rate is not a finite positive number.
        """
        validated: list[tuple[CurrencyPair, float]] = []
        for pair, rate in rates.items():
            # Raise: keys must be CurrencyPair so that order of currencies is explicit
            if not isinstance(pair, CurrencyPair):
                raise TypeError(f"Cannot call `set_rates` because key {pair!r} is not a CurrencyPair")
            checked_pair = self._make_pair("set_rates", pair.from_currency, pair.to_currency)
            validated.append((checked_pair, self._validate_rate("set_rates", rate)))

        for pair, value in validated:
            self._store(pair, value)

    def get_rate(self, from_currency: Currency, to_currency: Currency) -> float:
        """Return the rate converting $from_currency into $to_currency.

        Same-currency conversion returns 1.0 without looking into the table.

        Raises:
            TypeError: If a currency is not a Currency instance.
            RateNotFoundError: If no rate was set for this exact ordered pair.
        """
        pair = self._make_pair("get_rate", from_currency, to_currency)
        if pair.is_identity:
            return 1.0

        rate = self._rates.get(pair)
        # Raise: only explicitly stored rates (or their automatic inverses) are valid
        if rate is None:
            raise RateNotFoundError(f"Cannot call `get_rate` because exchange rate for $pair ({pair}) was not found")
        return rate

    def has_rate(self, from_currency: Currency, to_currency: Currency) -> bool:
        """True if `get_rate` would succeed for this pair."""
        pair = self._make_pair("has_rate", from_currency, to_currency)
        return pair.is_identity or pair in self._rates

    def pairs(self) -> list[CurrencyPair]:
        """Return all stored pairs in insertion order (identity pairs are never stored)."""
        return list(self._rates)

    # endregion

    # region Internal

    def _store(self, pair: CurrencyPair, rate: float) -> None:
        # Identity conversion is fixed to 1.0 and never stored
        if pair.is_identity:
            logger.debug(f"Ignored rate {rate} for identity pair {pair}")
            return

        inverse_rate = 1.0 / rate
        self._rates[pair] = rate
        self._rates[pair.inverse] = inverse_rate
        logger.debug(f"Stored rate {pair} = {rate} and {pair.inverse} = {inverse_rate}")

    @staticmethod
    def _make_pair(func_name: str, from_currency: Currency, to_currency: Currency) -> CurrencyPair:
        # Raise: only members of the Currency enumeration are supported
        for currency in (from_currency, to_currency):
            if not isinstance(currency, Currency):
                raise TypeError(f"Cannot call `{func_name}` because $currency ({currency!r}) is not a Currency instance")
        return CurrencyPair(from_currency, to_currency)

    @staticmethod
    def _validate_rate(func_name: str, rate: FloatLike) -> float:
        try:
            value = as_finite_float(rate)
        except (TypeError, ValueError) as e:
            raise InvalidRateError(f"Cannot call `{func_name}` because $rate ({rate!r}) is not a finite number") from e

        # Raise: rate must be strictly positive, so the inverse rate is always defined
        if value <= 0:
            raise InvalidRateError(f"Cannot call `{func_name}` because $rate ({value}) is not positive")

        # Raise: both directions must be finite, so tiny rates with an infinite inverse are refused
        if not math.isfinite(1.0 / value):
            raise InvalidRateError(f"Cannot call `{func_name}` because inverse of $rate ({value}) is not a finite number")
        return value

    # endregion

    # region Magic methods

    def __len__(self) -> int:
        """Number of stored directed rates (each `set_rate` adds two)."""
        return len(self._rates)

    def __contains__(self, pair: object) -> bool:
        return pair in self._rates

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rates={len(self._rates)})"

    # endregion
