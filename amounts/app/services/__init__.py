from .amount_service import AmountService
from .currency_metadata_store import CurrencyMetadataStore, PrecisionMapCache

__all__ = [
    "AmountService",
    "CurrencyMetadataStore",
    "PrecisionMapCache",
]
