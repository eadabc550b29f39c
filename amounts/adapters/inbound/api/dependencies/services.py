from typing import cast

import redis.asyncio as redis
from fastapi import Depends

from amounts.app.queries.get_currencies import GetCurrenciesQueryHandler
from amounts.app.services import AmountService, CurrencyMetadataStore
from amounts.shared.di import Container

from .container import get_container_dependency


def get_amount_service(
    container: Container = Depends(get_container_dependency),
) -> AmountService:
    return container.amount_service()


def get_metadata_store(
    container: Container = Depends(get_container_dependency),
) -> CurrencyMetadataStore:
    return container.metadata_store()


def get_currencies_query_handler(
    container: Container = Depends(get_container_dependency),
) -> GetCurrenciesQueryHandler:
    return container.currencies_query_handler()


def get_redis_client(
    container: Container = Depends(get_container_dependency),
) -> redis.Redis:
    return cast(redis.Redis, container.redis_client())
