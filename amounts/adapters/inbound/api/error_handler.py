from fastapi import HTTPException
from starlette import status

from amounts.domain.exceptions.currency import CurrencyNotFoundError


def handle_domain_error(exc: Exception) -> HTTPException:
    if isinstance(exc, CurrencyNotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        )

    if isinstance(exc, ValueError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        )

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected internal error occurred.",
    )
