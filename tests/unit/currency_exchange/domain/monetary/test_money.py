from decimal import Decimal

import pytest

from currency_exchange.domain.monetary.currency import Currency
from currency_exchange.domain.monetary.errors import InvalidAmountError, MismatchedCurrencyError, RateNotFoundError
from currency_exchange.domain.monetary.exchange_rate_table import ExchangeRateTable
from currency_exchange.domain.monetary.money import Money

BGN, EUR, USD, GBP, TRY = Currency.BGN, Currency.EUR, Currency.USD, Currency.GBP, Currency.TRY

# Constants
BGN_EUR_RATE = 0.511292

# Units of each currency per 1 EUR; every pair below is derived from these, so the table is consistent
UNITS_PER_EUR = {EUR: 1.0, BGN: 1.95583, USD: 1.05, GBP: 0.84, TRY: 37.5}


def create_consistent_table() -> ExchangeRateTable:
    table = ExchangeRateTable()
    currencies = list(UNITS_PER_EUR)
    for i, from_currency in enumerate(currencies):
        for to_currency in currencies[i + 1 :]:
            table.set_rate(from_currency, to_currency, UNITS_PER_EUR[to_currency] / UNITS_PER_EUR[from_currency])
    return table


# region Construction


def test_money_keeps_amount_and_currency():
    money = Money(100, BGN)
    assert money.amount == 100.0
    assert isinstance(money.amount, float)
    assert money.currency is BGN

    assert Money(Decimal("1.5"), USD).amount == 1.5
    assert Money("2.25", USD).amount == 2.25


def test_money_zero_is_allowed():
    assert Money(0, USD).amount == 0.0
    assert str(Money(-0.0, USD)) == "0.0000000000 USD"


def test_money_rejects_negative_amount():
    with pytest.raises(InvalidAmountError, match=r"Cannot init `Money` because \$amount \(-1.0\) is negative"):
        Money(-1, USD)


@pytest.mark.parametrize("amount", [float("nan"), float("inf"), "abc", None, True, 10**400])
def test_money_rejects_invalid_amount(amount):
    with pytest.raises(InvalidAmountError):
        Money(amount, USD)


def test_money_rejects_non_currency():
    with pytest.raises(TypeError):
        Money(1, "USD")


def test_money_is_immutable():
    money = Money(100, BGN)
    with pytest.raises(AttributeError):
        money.amount = 5
    with pytest.raises(AttributeError):
        money.currency = EUR


# endregion

# region Conversion


def test_convert_to_and_back():
    table = ExchangeRateTable()
    table.set_rate(BGN, EUR, BGN_EUR_RATE)
    original = Money(100, BGN)

    in_eur = original.convert_to(EUR, table)
    assert in_eur.currency is EUR
    assert in_eur.amount == pytest.approx(51.1292)
    assert str(in_eur) == "51.1292000000 EUR"

    back_in_bgn = in_eur.convert_to(BGN, table)
    assert back_in_bgn.currency is BGN
    assert back_in_bgn.amount == pytest.approx(100)

    # Receiver is untouched
    assert original == Money(100, BGN)


def test_convert_to_same_currency_needs_no_rate():
    money = Money(42.5, GBP)
    assert money.convert_to(GBP, ExchangeRateTable()) == money


def test_convert_to_missing_rate():
    table = ExchangeRateTable()
    table.set_rate(BGN, EUR, BGN_EUR_RATE)
    table.set_rate(EUR, GBP, 0.84)

    with pytest.raises(RateNotFoundError):
        Money(100, BGN).convert_to(GBP, table)


def test_convert_to_overflow():
    table = ExchangeRateTable()
    table.set_rate(BGN, TRY, 19.18541)

    with pytest.raises(InvalidAmountError, match=r"Cannot call `convert_to` because converted amount .* overflows the float range"):
        Money(1e308, BGN).convert_to(TRY, table)


def test_chained_conversion_matches_direct_conversion():
    table = create_consistent_table()
    start = Money(100, EUR)

    chained = start.convert_to(BGN, table).convert_to(EUR, table).convert_to(TRY, table).convert_to(GBP, table)
    direct = start.convert_to(GBP, table)

    assert chained.currency is direct.currency is GBP
    assert chained.amount == pytest.approx(direct.amount, rel=1e-12)
    assert direct.amount == pytest.approx(84.0)


# endregion

# region Equality and ordering


def test_equality_is_exact():
    assert Money(100, TRY) == Money(100.0, TRY)
    assert Money(100, TRY) != Money(100.0000001, TRY)
    assert Money(100, TRY) != 100
    assert len({Money(1, USD), Money(1.0, USD), Money(1, EUR)}) == 2


def test_equality_never_converts():
    table = ExchangeRateTable()
    table.set_rate(EUR, TRY, 1.0)
    eur = Money(100, EUR)
    lira = Money(100, TRY)

    assert eur.convert_to(TRY, table) == lira
    assert eur != lira
    assert Money(100, BGN) != Money(100, TRY)


def test_less_than_same_currency():
    liri_100 = Money(100, TRY)
    assert not liri_100 < Money(99, TRY)
    assert liri_100 < Money(101, TRY)
    assert liri_100 <= Money(100, TRY)
    assert liri_100 > Money(99, TRY)
    assert liri_100 >= Money(100, TRY)
    assert sorted([Money(3, USD), Money(1, USD), Money(2, USD)]) == [Money(1, USD), Money(2, USD), Money(3, USD)]


def test_ordering_different_currencies():
    leva = Money(100, BGN)
    euro = Money(100, EUR)
    with pytest.raises(MismatchedCurrencyError, match="Cannot compare values in different currencies: BGN and EUR"):
        leva < euro
    with pytest.raises(MismatchedCurrencyError):
        leva >= euro


def test_ordering_with_non_money():
    with pytest.raises(TypeError):
        Money(1, USD) < 5


# endregion

# region Formatting and parsing


def test_format_precision():
    money = Money(51.1292, EUR)
    assert money.format() == "51.1292000000 EUR"
    assert money.format(7) == "51.1292000 EUR"
    assert repr(money) == "Money(51.1292, EUR)"

    with pytest.raises(ValueError):
        money.format(6)


def test_format_keeps_seven_fractional_digits():
    money = Money(1.2345678, GBP)
    assert Money.from_str(money.format(7)) == money


def test_from_str():
    assert Money.from_str("51.1292 eur") == Money(51.1292, EUR)
    assert Money.from_str(" 100.0000000000 BGN ") == Money(100, BGN)


@pytest.mark.parametrize("value_str", ["", "100", "100EUR", "1 2 EUR", "abc EUR", "1 XYZ"])
def test_from_str_invalid(value_str):
    with pytest.raises(ValueError):
        Money.from_str(value_str)


def test_from_str_negative():
    with pytest.raises(InvalidAmountError):
        Money.from_str("-1 EUR")


# endregion
