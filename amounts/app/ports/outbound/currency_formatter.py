from abc import ABC, abstractmethod
from decimal import Decimal


class CurrencyFormatter(ABC):
    @abstractmethod
    def format(self, amount: Decimal, currency: str, locale: str, decimals: int) -> str:
        """
        Render a major-unit amount as a locale-aware currency string
        with exactly ``decimals`` fractional digits.
        """
        raise NotImplementedError()
