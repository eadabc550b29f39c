import re
from decimal import Decimal
from typing import Any, Optional, Protocol

from amounts.app.ports.outbound.currency_formatter import CurrencyFormatter
from amounts.domain.services.precision_service import PrecisionService
from amounts.domain.values import CurrencyCode
from amounts.shared.config import get_settings
from amounts.shared.logging import get_logger
from amounts.shared.observability import get_metrics_registry

logger = get_logger(__name__)
settings = get_settings()

_DISPLAY_NOISE = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


class DecimalsProvider(Protocol):
    async def get_decimals(self, currency: str) -> int: ...


class AmountService:
    """
    Currency-aware conversion between minor and major units.

    Every amount stored or compared is an integer in minor units. Major
    units only exist as Decimals for display and input parsing.
    """

    def __init__(
        self,
        decimals_provider: DecimalsProvider,
        precision_service: Optional[PrecisionService] = None,
        formatter: Optional[CurrencyFormatter] = None,
        default_locale: str = "en_US",
    ):
        self._decimals = decimals_provider
        self._precision = precision_service or PrecisionService()
        self._formatter = formatter
        self._default_locale = default_locale

    async def get_decimals(self, currency: str) -> int:
        return await self._decimals.get_decimals(currency)

    async def has_minor_units(self, currency: str) -> bool:
        return await self.get_decimals(currency) > 0

    async def get_multiplier(self, currency: str) -> int:
        return self._precision.multiplier(await self.get_decimals(currency))

    async def to_major_units(self, minor_amount: Any, currency: str) -> Decimal:
        """
        Convert from minor units (cents) to major units (dollars).

        Zero-decimal currencies come back unchanged.

        :param minor_amount: Amount in minor units
        :param currency: Currency code
        :return: Exact amount in major units
        """
        decimals = await self.get_decimals(currency)
        return self._precision.minor_to_major(minor_amount, decimals)

    async def to_minor_units(self, major_amount: Any, currency: str) -> int:
        """
        Convert from major units (dollars) to minor units (cents).

        Rounds half away from zero: 0.125 USD -> 13, 0.5 JPY -> 1.

        :param major_amount: Amount in major units (int, float, Decimal or numeric str)
        :param currency: Currency code
        :return: Amount in minor units
        :raises ValueError: If the amount is not a finite number, or needs more
            than the precision policy's ``max_digits`` digits in minor units
        """
        decimals = await self.get_decimals(currency)
        return self._precision.major_to_minor(major_amount, decimals)

    async def format(
        self, minor_amount: Any, currency: str, locale: Optional[str] = None
    ) -> str:
        """
        Format an amount in minor units for display.

        Falls back to ``"<CODE> <amount>"`` (e.g. ``"USD 1,234.56"``) when
        the locale-aware formatter is missing or fails.

        :param minor_amount: Amount in minor units
        :param currency: Currency code
        :param locale: Locale identifier, e.g. ``en_US``
        :return: Display string
        """
        code = CurrencyCode.canonicalize(currency)
        decimals = await self.get_decimals(code)
        major = self._precision.minor_to_major(minor_amount, decimals)
        locale = locale or self._default_locale

        if self._formatter is not None:
            try:
                return self._formatter.format(major, code, locale, decimals)
            except Exception as e:
                logger.warning(
                    "currency_format_fallback",
                    currency=code,
                    locale=locale,
                    error_type=type(e).__name__,
                    error=str(e),
                )

                if settings.ENABLE_METRICS:
                    metrics = get_metrics_registry()
                    metrics.format_fallbacks_total.labels(currency=code).inc()

        return self.format_plain(major, code, decimals)

    @staticmethod
    def format_plain(major: Decimal, code: str, decimals: int) -> str:
        return f"{code} {major:,.{decimals}f}"

    async def parse_to_minor_units(self, display_value: Any, currency: str) -> int:
        """
        Parse a display amount (major units) to minor units.

        Strings keep only digits, ``.`` and ``-``; the longest leading number
        in what remains is used, and no number at all reads as zero. So
        ``"$1,234.56"`` -> 123456 USD. Comma decimal separators are not
        understood: ``"12,34"`` reads as 1234 major units.

        :param display_value: Display string or number in major units
        :param currency: Currency code
        :return: Amount in minor units
        :raises ValueError: If the amount needs more digits than the precision
            policy allows
        """
        if isinstance(display_value, str):
            display_value = self.extract_number(display_value)

        return await self.to_minor_units(display_value, currency)

    @staticmethod
    def extract_number(display_value: str) -> Decimal:
        cleaned = _DISPLAY_NOISE.sub("", display_value)
        match = _LEADING_NUMBER.match(cleaned)

        if match is None:
            return Decimal(0)

        return Decimal(match.group(0))

    async def is_valid_amount(self, amount: Any, currency: str) -> bool:
        """
        Check that an amount in minor units can be stored for a currency.

        :param amount: Candidate amount in minor units
        :param currency: Currency code
        :return: True if numeric, non-negative and whole for zero-decimal currencies
        """
        try:
            value = self._precision.to_decimal(amount)
        except ValueError:
            return False

        if value < 0:
            return False

        if await self.get_decimals(currency) == 0 and not self._precision.is_whole(value):
            return False

        return True

    @staticmethod
    def compare(amount_a: Any, amount_b: Any, currency: str) -> int:
        """
        Three-way comparison of two amounts in minor units.

        Operands are truncated to integers first. The currency does not
        take part, minor units already share a scale.

        :return: -1, 0 or 1
        """
        a, b = int(amount_a), int(amount_b)

        return (a > b) - (a < b)
