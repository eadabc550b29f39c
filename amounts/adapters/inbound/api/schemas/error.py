from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    detail: str = Field(
        ...,
        description="Why the currency or amount request was rejected.",
        examples=["Currency XYZ not found"],
    )
