from __future__ import annotations

from typing import NamedTuple

from currency_exchange.domain.monetary.currency import Currency


class CurrencyPair(NamedTuple):
    """Ordered (from, to) key for looking up exchange rates.

    Equality and hashing respect order, so (BGN, EUR) and (EUR, BGN) are different keys.
    """

    from_currency: Currency
    to_currency: Currency

    @property
    def inverse(self) -> CurrencyPair:
        """Return the pair with both sides swapped."""
        return CurrencyPair(self.to_currency, self.from_currency)

    @property
    def is_identity(self) -> bool:
        """True when both sides are the same currency."""
        return self.from_currency == self.to_currency

    def __str__(self) -> str:
        """Return string like 'BGN/EUR'."""
        return f"{self.from_currency.code}/{self.to_currency.code}"
