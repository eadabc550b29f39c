from dataclasses import dataclass


@dataclass(frozen=True)
class RedisCurrency:
    code: str
    name: str
    symbol: str
    decimals: int
    is_active: bool = True

    def __post_init__(self):
        if not self.code:
            raise ValueError("Code cannot be empty")
        if not self.code.isupper():
            raise ValueError(f"Code must be uppercase: {self.code}")

        if self.decimals < 0:
            raise ValueError(f"Decimals cannot be negative: {self.decimals}")

    @classmethod
    def from_dict(cls, data: dict) -> "RedisCurrency":
        try:
            return cls(
                code=data["code"],
                name=data["name"],
                symbol=data["symbol"],
                decimals=int(data["decimals"]),
                is_active=bool(data.get("is_active", True)),
            )

        except KeyError as e:
            raise ValueError(f"Missing required field in cached currency: {e}") from e
        except (ValueError, TypeError) as e:
            raise ValueError(f"Invalid cached currency data: {e}") from e

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "name": self.name,
            "symbol": self.symbol,
            "decimals": self.decimals,
            "is_active": self.is_active,
        }


def decimals_map_from_dict(data: dict) -> dict[str, int]:
    if not isinstance(data, dict):
        raise ValueError(f"Expected an object, got {type(data).__name__}")

    result: dict[str, int] = {}

    for code, decimals in data.items():
        if not isinstance(decimals, int) or isinstance(decimals, bool):
            raise ValueError(f"Invalid decimals for {code}: {decimals!r}")

        result[str(code)] = decimals

    return result
