import copy
from decimal import Decimal

from babel import Locale
from babel.numbers import NumberPattern

from amounts.app.ports.outbound.currency_formatter import CurrencyFormatter


class BabelCurrencyFormatter(CurrencyFormatter):
    """
    Locale-aware currency formatting through Babel's CLDR data.

    The locale's standard currency pattern decides symbol placement and
    grouping; the fraction digits always follow the currency's precision
    rather than CLDR's opinion of it.
    """

    def format(self, amount: Decimal, currency: str, locale: str, decimals: int) -> str:
        babel_locale = Locale.parse(locale)
        pattern = self._pattern_for(babel_locale, decimals)

        return pattern.apply(
            amount,
            babel_locale,
            currency=currency,
            currency_digits=False,
        )

    @staticmethod
    def _pattern_for(babel_locale: Locale, decimals: int) -> NumberPattern:
        # Locale patterns are shared CLDR objects, never mutate them in place.
        pattern = copy.copy(babel_locale.currency_formats["standard"])
        pattern.frac_prec = (decimals, decimals)

        return pattern
