from decimal import Decimal

from pydantic import BaseModel, Field, field_serializer


class FormattedAmountResponse(BaseModel):
    minor_amount: int = Field(
        ..., description="Amount in minor units.", examples=[123456]
    )
    major_amount: Decimal = Field(
        ..., description="Amount in major units.", examples=["1234.56"]
    )
    currency: str = Field(..., description="Canonical currency code.", examples=["USD"])
    formatted: str = Field(
        ..., description="Locale-aware display string.", examples=["$1,234.56"]
    )

    @field_serializer("major_amount")
    def serialize_major_amount(self, value: Decimal) -> str:
        return str(value)


class ParsedAmountResponse(BaseModel):
    minor_amount: int = Field(
        ..., description="Parsed amount in minor units.", examples=[123456]
    )
    currency: str = Field(..., description="Canonical currency code.", examples=["USD"])
