from fastapi import APIRouter, Depends, Path, Response
from starlette import status

from amounts.adapters.inbound.api.dependencies import (
    get_currencies_query_handler,
    get_metadata_store,
)
from amounts.adapters.inbound.api.error_handler import handle_domain_error
from amounts.adapters.inbound.api.schemas.currency import (
    CurrencyDecimalsResponse,
    CurrencyListResponse,
    CurrencyResponse,
)
from amounts.adapters.inbound.api.schemas.error import ErrorResponse
from amounts.app.queries.get_currencies import GetCurrenciesQueryHandler
from amounts.app.services import CurrencyMetadataStore
from amounts.domain.exceptions.currency import CurrencyNotFoundError
from amounts.shared.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/currencies", tags=["Currencies"])

CODE_PATH = Path(min_length=1, max_length=10, examples=["USD"])


@router.get(
    "",
    response_model=CurrencyListResponse,
    summary="List Currencies",
    description="All active currencies, ordered by name",
)
async def list_currencies(
    handler: GetCurrenciesQueryHandler = Depends(get_currencies_query_handler),
) -> CurrencyListResponse:
    currencies = await handler.list_active()

    logger.debug("currencies_listed", currency_count=len(currencies))

    return CurrencyListResponse(
        data=[CurrencyResponse.from_currency(c) for c in currencies]
    )


@router.post(
    "/cache/invalidate",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Invalidate Currency Cache",
    description="Drop cached currency metadata after an administrative change",
)
async def invalidate_currency_cache(
    store: CurrencyMetadataStore = Depends(get_metadata_store),
) -> Response:
    await store.invalidate_cache()

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{code}",
    response_model=CurrencyResponse,
    responses={
        status.HTTP_404_NOT_FOUND: {
            "model": ErrorResponse,
            "description": "No active currency with this code",
        },
    },
    summary="Get Currency",
)
async def get_currency(
    code: str = CODE_PATH,
    handler: GetCurrenciesQueryHandler = Depends(get_currencies_query_handler),
) -> CurrencyResponse:
    try:
        currency = await handler.get_by_code(code)
    except CurrencyNotFoundError as e:
        logger.info("currency_not_found", code=e.code)
        raise handle_domain_error(e)

    return CurrencyResponse.from_currency(currency)


@router.get(
    "/{code}/decimals",
    response_model=CurrencyDecimalsResponse,
    summary="Get Currency Decimals",
    description="Decimal places for any code; unknown codes get the default precision",
)
async def get_currency_decimals(
    code: str = CODE_PATH,
    handler: GetCurrenciesQueryHandler = Depends(get_currencies_query_handler),
) -> CurrencyDecimalsResponse:
    result = await handler.get_decimals(code)

    return CurrencyDecimalsResponse(code=result.code, decimals=result.decimals)
