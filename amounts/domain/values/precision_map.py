from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from .currency_code import CurrencyCode

DEFAULT_DECIMALS = 2


class PrecisionMap(Mapping[str, int]):
    """
    Read-only currency code -> decimal places mapping.

    The underlying dict is built in full before the instance exists, so a
    published map is never observed half-populated.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[Any, Any] | None = None):
        built: dict[str, int] = {}

        for raw_code, raw_decimals in (data or {}).items():
            code = CurrencyCode.canonicalize(raw_code)

            if not code:
                raise ValueError(f"Currency code cannot be empty: {raw_code!r}")
            if isinstance(raw_decimals, bool) or not isinstance(raw_decimals, int):
                raise ValueError(
                    f"Decimals for {code} must be an integer, got: {raw_decimals!r}"
                )
            if raw_decimals < 0:
                raise ValueError(
                    f"Decimals for {code} cannot be negative: {raw_decimals}"
                )

            built[code] = raw_decimals

        self._data = MappingProxyType(built)

    def __getitem__(self, code: str) -> int:
        return self._data[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"PrecisionMap({dict(self._data)!r})"


FALLBACK_DECIMALS = PrecisionMap(
    {
        "JPY": 0,
        "KRW": 0,
        "VND": 0,
        "UGX": 0,
        "RWF": 0,
        "BHD": 3,
        "JOD": 3,
        "KWD": 3,
        "OMR": 3,
        "TND": 3,
    }
)
