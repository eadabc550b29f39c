from pydantic import BaseModel, Field

from amounts.domain.models import Currency


class CurrencyResponse(BaseModel):
    code: str = Field(..., description="ISO 4217 currency code.", examples=["USD"])
    name: str = Field(..., description="Currency name.", examples=["US Dollar"])
    symbol: str = Field(..., description="Currency symbol.", examples=["$"])
    decimals: int = Field(
        ..., ge=0, description="Decimal places in one major unit.", examples=[2]
    )

    @classmethod
    def from_currency(cls, currency: Currency) -> "CurrencyResponse":
        return cls(
            code=currency.code,
            name=currency.name,
            symbol=currency.symbol,
            decimals=currency.decimals,
        )


class CurrencyListResponse(BaseModel):
    data: list[CurrencyResponse]


class CurrencyDecimalsResponse(BaseModel):
    code: str = Field(..., description="Canonical currency code.", examples=["JPY"])
    decimals: int = Field(
        ..., ge=0, description="Decimal places used for the currency.", examples=[0]
    )
