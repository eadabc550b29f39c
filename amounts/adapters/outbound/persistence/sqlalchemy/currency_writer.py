import time
from typing import Callable

from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from amounts.adapters.outbound.persistence.sqlalchemy.mapper import SQLAlchemyMapper
from amounts.adapters.outbound.persistence.sqlalchemy.models import CurrencyModel
from amounts.app.ports.outbound.currency_source import CurrencyWriter
from amounts.domain.exceptions.currency import CurrencyStorageError
from amounts.domain.models import Currency
from amounts.shared.config import get_settings
from amounts.shared.logging import get_logger
from amounts.shared.observability import get_metrics_registry

logger = get_logger(__name__)
settings = get_settings()


class PostgresCurrencyWriter(CurrencyWriter):
    def __init__(self, session_factory: Callable[[], AsyncSession]):
        self._session_factory = session_factory
        self._mapper = SQLAlchemyMapper()

    async def save_batch(self, currencies: list[Currency]) -> None:
        if not currencies:
            return

        start_time = time.time()

        try:
            values = [self._mapper.currency_to_dict(c) for c in currencies]
            stmt = insert(CurrencyModel).values(values)

            stmt = stmt.on_conflict_do_update(
                index_elements=["code"],
                set_={
                    "name": stmt.excluded.name,
                    "symbol": stmt.excluded.symbol,
                    "decimals": stmt.excluded.decimals,
                    "is_active": stmt.excluded.is_active,
                    "updated_at": func.now(),
                },
            )

            async with self._session_factory() as session, session.begin():
                await session.execute(stmt)

            duration = time.time() - start_time

            logger.debug(
                "postgres_currencies_saved",
                currency_count=len(currencies),
                duration_ms=round(duration * 1000, 2),
            )

            if settings.ENABLE_METRICS:
                metrics = get_metrics_registry()
                metrics.db_queries_total.labels(
                    operation="upsert_batch", table="currencies"
                ).inc()
                metrics.db_query_duration_seconds.labels(
                    operation="upsert_batch", table="currencies"
                ).observe(duration)

        except Exception as e:
            logger.error(
                "postgres_currencies_save_failed",
                currency_count=len(currencies),
                error=str(e),
                exc_info=True,
            )
            raise CurrencyStorageError(operation="save_batch", reason=str(e)) from e
