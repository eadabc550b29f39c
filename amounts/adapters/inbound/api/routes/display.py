from typing import Optional

from fastapi import APIRouter, Depends, Query
from starlette import status

from amounts.adapters.inbound.api.dependencies import get_amount_service
from amounts.adapters.inbound.api.error_handler import handle_domain_error
from amounts.adapters.inbound.api.schemas.amount import (
    FormattedAmountResponse,
    ParsedAmountResponse,
)
from amounts.adapters.inbound.api.schemas.error import ErrorResponse
from amounts.app.services import AmountService
from amounts.domain.values import CurrencyCode
from amounts.shared.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/amounts", tags=["Amounts"])


@router.get(
    "/format",
    response_model=FormattedAmountResponse,
    summary="Format Amount",
    description="Render an amount in minor units for display",
)
async def format_amount(
    amount: int = Query(examples=[123456]),
    currency: str = Query(min_length=1, max_length=10, examples=["USD"]),
    locale: Optional[str] = Query(default=None, max_length=20, examples=["en_US"]),
    service: AmountService = Depends(get_amount_service),
) -> FormattedAmountResponse:
    code = CurrencyCode.canonicalize(currency)

    major = await service.to_major_units(amount, code)
    formatted = await service.format(amount, code, locale)

    return FormattedAmountResponse(
        minor_amount=amount,
        major_amount=major,
        currency=code,
        formatted=formatted,
    )


@router.get(
    "/parse",
    response_model=ParsedAmountResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "model": ErrorResponse,
            "description": "Value does not fit in minor units",
        },
    },
    summary="Parse Amount",
    description="Parse a user-entered major-unit amount into minor units",
)
async def parse_amount(
    value: str = Query(max_length=64, examples=["$1,234.56"]),
    currency: str = Query(min_length=1, max_length=10, examples=["USD"]),
    service: AmountService = Depends(get_amount_service),
) -> ParsedAmountResponse:
    code = CurrencyCode.canonicalize(currency)

    try:
        minor = await service.parse_to_minor_units(value, code)
    except ValueError as e:
        logger.warning("amount_parse_failed", currency=code, error=str(e))
        raise handle_domain_error(e)

    logger.debug("amount_parsed", currency=code, minor_amount=minor)

    return ParsedAmountResponse(minor_amount=minor, currency=code)
