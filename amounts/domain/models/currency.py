from dataclasses import dataclass

from amounts.domain.values import CurrencyCode

MAX_DECIMALS = 8


@dataclass(frozen=True)
class Currency:
    code: str
    name: str
    symbol: str
    decimals: int = 2
    is_active: bool = True

    def __post_init__(self) -> None:
        code = CurrencyCode.canonicalize(self.code)

        if len(code) != 3 or not code.isalpha():
            raise ValueError(f"Currency code must be 3 letters: {self.code}")
        if not self.name:
            raise ValueError(f"Currency name cannot be empty: {code}")
        if len(self.symbol) > 10:
            raise ValueError(f"Currency symbol must be at most 10 characters: {self.symbol}")
        if not 0 <= self.decimals <= MAX_DECIMALS:
            raise ValueError(
                f"Decimals must be between 0 and {MAX_DECIMALS}: {self.decimals}"
            )

        object.__setattr__(self, "code", code)

    def __str__(self) -> str:
        return self.code

    def has_minor_units(self) -> bool:
        return self.decimals > 0
