from __future__ import annotations

import math

from currency_exchange.domain.monetary.currency import Currency
from currency_exchange.domain.monetary.errors import InvalidAmountError, MismatchedCurrencyError
from currency_exchange.domain.monetary.exchange_rate_table import ExchangeRateTable
from currency_exchange.utils.float_tools import FloatLike, as_finite_float

# Fractional digits used by `Money.format` when no precision is given
DEFAULT_FORMAT_PRECISION = 10
# Fewer fractional digits would not reproduce converted amounts reliably
MIN_FORMAT_PRECISION = 7


class Money:
    """Immutable non-negative monetary amount in one Currency.

    Uses `float` arithmetic. Conversion never changes the instance, it returns a new Money.
    The exchange rate table is passed into `convert_to` and never stored.
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: FloatLike, currency: Currency):
        """Initialize Money with amount and currency.

        Args:
            amount: Non-negative finite number (float-like scalar).
            currency (Currency): Currency of the amount.

        Raises:
            InvalidAmountError: If $amount is negative or not a finite number.
            TypeError: If $currency is not Currency instance.
        """
        # Raise: currency must be a member of the supported enumeration
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency!r}")

        # Raise: $amount must be convertible to a finite float
        try:
            value = as_finite_float(amount)
        except (TypeError, ValueError) as e:
            raise InvalidAmountError(f"Cannot init `Money` because $amount ({amount!r}) is not a finite number") from e

        # Raise: money can never be negative
        if value < 0:
            raise InvalidAmountError(f"Cannot init `Money` because $amount ({value}) is negative")

        # Normalize -0.0, so it never renders with a minus sign
        self._amount = value if value != 0 else 0.0
        self._currency = currency

    @property
    def amount(self) -> float:
        """Get the amount."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    def convert_to(self, target_currency: Currency, rates: ExchangeRateTable) -> Money:
        """Return a new Money with this amount converted into $target_currency.

        Each call is one independent lookup in $rates; same-currency conversion uses rate 1.0.

        Args:
            target_currency (Currency): Currency of the result.
            rates (ExchangeRateTable): Table providing the rate.

        Returns:
            Money: New instance in $target_currency.

        Raises:
            RateNotFoundError: If $rates has no rate for ($self.currency -> $target_currency).
            InvalidAmountError: If the converted amount overflows the float range.
        """
        rate = rates.get_rate(self._currency, target_currency)
        converted = self._amount * rate

        # Raise: a huge amount times a large rate can overflow to inf
        if not math.isfinite(converted):
            raise InvalidAmountError(
                f"Cannot call `convert_to` because converted amount $amount ({self._amount}) * $rate ({rate}) overflows the float range"
            )
        return Money(converted, target_currency)

    def _check_same_currency(self, other: Money) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            MismatchedCurrencyError: If currencies don't match.
        """
        if self._currency != other.currency:
            raise MismatchedCurrencyError(f"Cannot compare values in different currencies: {self._currency} and {other.currency}")

    # Equality never converts: values in different currencies are never equal
    def __eq__(self, other) -> bool:
        """Check exact equality of amount and currency with another Money object."""
        if not isinstance(other, Money):
            return False
        return self._currency == other.currency and self._amount == other.amount

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self._amount, self._currency.code))

    # Comparison operators (same currency required)
    def __lt__(self, other) -> bool:
        """Check if this Money is less than another Money object."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self._amount < other.amount

    def __le__(self, other) -> bool:
        """Check if this Money is less than or equal to another Money object."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self._amount <= other.amount

    def __gt__(self, other) -> bool:
        """Check if this Money is greater than another Money object."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self._amount > other.amount

    def __ge__(self, other) -> bool:
        """Check if this Money is greater than or equal to another Money object."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self._amount >= other.amount

    # String representations
    def format(self, precision: int = DEFAULT_FORMAT_PRECISION) -> str:
        """Return string like '51.1292000000 EUR' with $precision fractional digits.

        Raises:
            ValueError: If $precision is lower than MIN_FORMAT_PRECISION.
        """
        # Raise: too few digits would lose information about converted amounts
        if not isinstance(precision, int) or precision < MIN_FORMAT_PRECISION:
            raise ValueError(f"$precision must be an integer >= {MIN_FORMAT_PRECISION}, but provided value is: {precision!r}")
        return f"{self._amount:.{precision}f} {self._currency.code}"

    def __str__(self) -> str:
        """Return string like '100.0000000000 BGN'."""
        return self.format()

    def __repr__(self) -> str:
        """Return string like 'Money(100.0, BGN)'."""
        return f"{self.__class__.__name__}({self._amount!r}, {self._currency.code})"

    @classmethod
    def from_str(cls, value_str: str) -> Money:
        """Parse Money from string like '51.1292 EUR'.

        Args:
            value_str (str): String representation, amount and currency code separated by whitespace.

        Returns:
            Money: Money object.

        Raises:
            ValueError: If string format is invalid.
            InvalidAmountError: If the parsed amount is negative.
        """
        value_str = value_str.strip()
        if not value_str:
            raise ValueError("Value string with $value_str = '' cannot be empty")

        parts = value_str.split()
        if len(parts) != 2:
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'amount currency_code'")

        amount_part, currency_part = parts

        try:
            amount = float(amount_part)
        except ValueError as e:
            raise ValueError(f"Invalid amount part '{amount_part}' in string '{value_str}'") from e

        try:
            currency = Currency.from_str(currency_part)
        except ValueError as e:
            raise ValueError(f"Invalid currency part '{currency_part}' in string '{value_str}'") from e

        return cls(amount, currency)
