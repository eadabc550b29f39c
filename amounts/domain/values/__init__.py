from .currency_code import CurrencyCode
from .precision_map import DEFAULT_DECIMALS, FALLBACK_DECIMALS, PrecisionMap

__all__ = [
    "CurrencyCode",
    "PrecisionMap",
    "FALLBACK_DECIMALS",
    "DEFAULT_DECIMALS",
]
