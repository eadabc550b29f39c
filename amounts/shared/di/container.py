from decimal import ROUND_HALF_UP

import redis.asyncio as redis
from dependency_injector import containers, providers
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from amounts.adapters.outbound.formatting.babel_formatter import BabelCurrencyFormatter
from amounts.adapters.outbound.persistence.redis.currency_cache import (
    RedisCurrencyCache,
)
from amounts.adapters.outbound.persistence.repositories.cached_currency_source import (
    CachedCurrencySource,
)
from amounts.adapters.outbound.persistence.sqlalchemy.currency_source import (
    PostgresCurrencySource,
)
from amounts.adapters.outbound.persistence.sqlalchemy.currency_writer import (
    PostgresCurrencyWriter,
)
from amounts.app.commands.seed_currencies import SeedCurrenciesCommandHandler
from amounts.app.queries.get_currencies import GetCurrenciesQueryHandler
from amounts.app.services import AmountService, CurrencyMetadataStore, PrecisionMapCache
from amounts.domain.services import PrecisionPolicy, PrecisionService
from amounts.shared.config import get_settings
from amounts.shared.logging import get_logger

logger = get_logger(__name__)


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    db_engine = providers.Singleton(
        create_async_engine,
        config.database_url,
        pool_size=config.db_pool_size,
        max_overflow=config.db_max_overflow,
        pool_pre_ping=True,
        pool_recycle=3600,
        future=True,
        echo=False,
    )

    db_session_factory = providers.Singleton(
        async_sessionmaker,
        bind=db_engine,
        expire_on_commit=False,
        class_=AsyncSession,
    )

    redis_client = providers.Singleton(
        redis.from_url,
        config.redis_url,
        decode_responses=False,
        socket_connect_timeout=5,
        socket_timeout=5,
        max_connections=50,
        health_check_interval=30,
        retry_on_timeout=True,
        retry_on_error=[ConnectionError, TimeoutError],
    )

    precision_policy = providers.Singleton(
        PrecisionPolicy,
        rounding_mode=ROUND_HALF_UP,
    )

    precision_service = providers.Singleton(
        PrecisionService,
        policy=precision_policy,
    )

    currency_cache = providers.Singleton(
        RedisCurrencyCache,
        redis_client=redis_client,
        ttl_seconds=config.currency_cache_ttl_seconds,
    )

    postgres_currency_source = providers.Singleton(
        PostgresCurrencySource,
        session_factory=db_session_factory,
    )

    currency_source = providers.Singleton(
        CachedCurrencySource,
        cache=currency_cache,
        fallback=postgres_currency_source,
    )

    currency_writer = providers.Factory(
        PostgresCurrencyWriter,
        session_factory=db_session_factory,
    )

    precision_map_cache = providers.Singleton(
        PrecisionMapCache,
        fallback_retry_seconds=config.fallback_retry_seconds,
        max_age_seconds=config.precision_map_max_age_seconds,
    )

    metadata_store = providers.Singleton(
        CurrencyMetadataStore,
        source=currency_source,
        cache=precision_map_cache,
        timeout_seconds=config.currency_source_timeout_seconds,
        retry_attempts=config.currency_source_retry_attempts,
    )

    currency_formatter = providers.Singleton(BabelCurrencyFormatter)

    amount_service = providers.Singleton(
        AmountService,
        decimals_provider=metadata_store,
        precision_service=precision_service,
        formatter=currency_formatter,
        default_locale=config.default_locale,
    )

    currencies_query_handler = providers.Factory(
        GetCurrenciesQueryHandler,
        currency_source=currency_source,
        metadata_store=metadata_store,
    )

    seed_currencies_command_handler = providers.Factory(
        SeedCurrenciesCommandHandler,
        currency_writer=currency_writer,
        metadata_store=metadata_store,
    )


async def cleanup_resources(container: Container) -> None:
    logger.info("container_cleanup_starting")

    try:
        redis_instance = container.redis_client()
        await redis_instance.aclose()
        logger.info("redis_closed")
    except Exception as e:
        logger.warning("redis_close_error", error=str(e))

    try:
        engine_instance = container.db_engine()
        await engine_instance.dispose()
        logger.info("database_engine_disposed")
    except Exception as e:
        logger.warning("engine_dispose_error", error=str(e))

    logger.info("container_cleanup_complete")


def get_container(app_type: str = "api") -> Container:
    settings = get_settings()

    container = Container()

    redis_url = f"redis://{settings.REDIS_HOST}:{settings.REDIS_PORT}/0"

    if app_type == "api":
        db_pool_size = 10
        db_max_overflow = 5
    else:
        db_pool_size = 2
        db_max_overflow = 0

    container.config.from_dict(
        {
            "database_url": str(settings.DATABASE_URL),
            "redis_url": redis_url,
            "db_pool_size": db_pool_size,
            "db_max_overflow": db_max_overflow,
            "currency_cache_ttl_seconds": settings.CURRENCY_CACHE_TTL_SECONDS,
            "currency_source_timeout_seconds": settings.CURRENCY_SOURCE_TIMEOUT_SECONDS,
            "currency_source_retry_attempts": settings.CURRENCY_SOURCE_RETRY_ATTEMPTS,
            "fallback_retry_seconds": float(settings.FALLBACK_RETRY_SECONDS),
            "precision_map_max_age_seconds": float(
                settings.PRECISION_MAP_MAX_AGE_SECONDS
            ),
            "default_locale": settings.DEFAULT_LOCALE,
        }
    )

    logger.info("di_container_configured", app_type=app_type, db_pool_size=db_pool_size)

    return container
