from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any, Optional

_ONE = Decimal(1)


@dataclass(frozen=True)
class PrecisionPolicy:
    """
    Policy for minor/major unit arithmetic.

    ROUND_HALF_UP in the decimal module rounds ties away from zero, so
    12.345 USD becomes 1235 minor units and -12.345 becomes -1235.
    """

    rounding_mode: str = ROUND_HALF_UP
    max_digits: int = 64


class PrecisionService:
    """
    Domain service for exact minor/major unit arithmetic.

    All major-unit values are Decimals. Conversions are exact for any
    minor amount; major to minor stays exact up to ``max_digits``
    significant digits.
    """

    def __init__(self, policy: Optional[PrecisionPolicy] = None):
        self._policy = policy or PrecisionPolicy()

    @property
    def policy(self) -> PrecisionPolicy:
        return self._policy

    @staticmethod
    def to_decimal(value: Any) -> Decimal:
        """
        Coerce a numeric value to Decimal.

        Floats go through str(), so ``1.005`` becomes
        ``Decimal("1.005")`` instead of its binary approximation.

        :param value: int, float, Decimal or numeric string
        :return: Finite Decimal
        :raises ValueError: If the value is not a finite number
        """
        if isinstance(value, bool):
            raise ValueError(f"Boolean is not a monetary amount: {value}")

        try:
            if isinstance(value, Decimal):
                result = value
            elif isinstance(value, int):
                result = Decimal(value)
            elif isinstance(value, float):
                result = Decimal(str(value))
            elif isinstance(value, str):
                result = Decimal(value.strip())
            else:
                raise ValueError(f"Unsupported amount type: {type(value).__name__}")
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount: {value!r}") from e

        if not result.is_finite():
            raise ValueError(f"Amount must be finite: {value!r}")

        return result

    @staticmethod
    def multiplier(decimals: int) -> int:
        return 10**decimals

    @staticmethod
    def shift(value: Decimal, places: int) -> Decimal:
        """Move the decimal point by ``places`` without any context rounding."""
        if places == 0:
            return value

        sign, digits, exponent = value.as_tuple()

        return Decimal((sign, digits, exponent + places))

    def minor_to_major(self, minor: Any, decimals: int) -> Decimal:
        """
        Convert minor units to major units.

        :param minor: Amount in minor units
        :param decimals: Currency precision
        :return: Exact Decimal value in major units
        """
        return self.shift(self.to_decimal(minor), -decimals)

    def major_to_minor(self, major: Any, decimals: int) -> int:
        """
        Convert major units to minor units, rounding ties away from zero.

        :param major: Amount in major units
        :param decimals: Currency precision
        :return: Integer amount in minor units
        :raises ValueError: If the amount is not a finite number or needs more
            than ``max_digits`` significant digits in minor units
        """
        scaled = self.shift(self.to_decimal(major), decimals)

        with localcontext() as ctx:
            ctx.prec = self._policy.max_digits

            try:
                rounded = scaled.quantize(_ONE, rounding=self._policy.rounding_mode)
            except InvalidOperation as e:
                raise ValueError(
                    f"Amount exceeds {self._policy.max_digits} digits: {major!r}"
                ) from e

        return int(rounded)

    @staticmethod
    def is_whole(value: Decimal) -> bool:
        return value == value.to_integral_value()
