from __future__ import annotations

from enum import Enum


class Currency(Enum):
    """Closed set of currencies supported by the library.

    The value of each member is its ISO 4217 code.

    Members:
        BGN: Bulgarian Lev.
        EUR: Euro.
        USD: US Dollar.
        GBP: British Pound.
        TRY: Turkish Lira.
    """

    BGN = "BGN"
    EUR = "EUR"
    USD = "USD"
    GBP = "GBP"
    TRY = "TRY"

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self.value

    @property
    def display_name(self) -> str:
        """Get the full currency name."""
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_str(cls, code: str) -> Currency:
        """Get currency by code.

        Args:
            code (str): Currency code to look up, case-insensitive.

        Returns:
            Currency: The matching member.

        Raises:
            TypeError: If $code is not a string.
            ValueError: If $code is not a supported currency.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        normalized = code.upper().strip()
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Currency with code '{normalized}' is not supported. Available currencies: {[c.code for c in cls]}") from None

    def __str__(self) -> str:
        """Return the currency code."""
        return self.value


# Single source of truth for names: defined once and reused
_DISPLAY_NAMES = {
    Currency.BGN: "Bulgarian Lev",
    Currency.EUR: "Euro",
    Currency.USD: "US Dollar",
    Currency.GBP: "British Pound",
    Currency.TRY: "Turkish Lira",
}
