from .currency import Currency

__all__ = [
    "Currency",
]
