from decimal import Decimal

import pytest
from babel import Locale, UnknownLocaleError

from amounts.adapters.outbound.formatting.babel_formatter import BabelCurrencyFormatter


def test_formats_us_dollars():
    fmt = BabelCurrencyFormatter()

    assert fmt.format(Decimal("12.34"), "USD", "en_US", 2) == "$12.34"
    assert fmt.format(Decimal("1234567.89"), "USD", "en_US", 2) == "$1,234,567.89"


def test_fraction_digits_follow_currency_precision():
    fmt = BabelCurrencyFormatter()

    assert fmt.format(Decimal("1234"), "JPY", "en_US", 0) == "¥1,234"
    assert fmt.format(Decimal("1.234"), "BHD", "en_US", 3).endswith("1.234")
    # CLDR would use 2 digits for an unknown code
    assert fmt.format(Decimal("1.5"), "XBT", "en_US", 8).endswith("1.50000000")


def test_formats_with_locale_conventions():
    fmt = BabelCurrencyFormatter()

    result = fmt.format(Decimal("1234.56"), "EUR", "de_DE", 2)

    assert "1.234,56" in result
    assert "€" in result


def test_does_not_mutate_shared_locale_pattern():
    fmt = BabelCurrencyFormatter()
    before = Locale.parse("en_US").currency_formats["standard"].frac_prec

    fmt.format(Decimal("1"), "BHD", "en_US", 3)

    assert Locale.parse("en_US").currency_formats["standard"].frac_prec == before


def test_unknown_locale_raises():
    fmt = BabelCurrencyFormatter()

    with pytest.raises((UnknownLocaleError, ValueError)):
        fmt.format(Decimal("1"), "USD", "xx_YY", 2)
