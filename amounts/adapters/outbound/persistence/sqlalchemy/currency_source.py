import time
from typing import Callable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from amounts.app.ports.outbound.currency_source import CurrencySource
from amounts.domain.exceptions.currency import CurrencySourceUnavailableError
from amounts.domain.models import Currency
from amounts.shared.config import get_settings
from amounts.shared.logging import get_logger
from amounts.shared.observability import get_metrics_registry

from .mapper import SQLAlchemyMapper
from .models import CurrencyModel

logger = get_logger(__name__)
settings = get_settings()


class PostgresCurrencySource(CurrencySource):
    def __init__(self, session_factory: Callable[[], AsyncSession]):
        self._session_factory = session_factory
        self._mapper = SQLAlchemyMapper()

    async def fetch_decimals_map(self) -> dict[str, int]:
        start_time = time.time()

        try:
            async with self._session_factory() as session:
                stmt = select(CurrencyModel.code, CurrencyModel.decimals)
                result = await session.execute(stmt)
                rows = result.all()

        except (SQLAlchemyError, OSError) as e:
            raise CurrencySourceUnavailableError("Postgres", str(e)) from e

        self._observe("fetch_decimals_map", start_time, row_count=len(rows))

        return {code: decimals for code, decimals in rows}

    async def fetch_active_currencies(self) -> list[Currency]:
        start_time = time.time()

        try:
            async with self._session_factory() as session:
                stmt = (
                    select(CurrencyModel)
                    .where(CurrencyModel.is_active.is_(True))
                    .order_by(CurrencyModel.name)
                )
                result = await session.execute(stmt)
                models = result.scalars().all()

        except (SQLAlchemyError, OSError) as e:
            raise CurrencySourceUnavailableError("Postgres", str(e)) from e

        self._observe("fetch_active_currencies", start_time, row_count=len(models))

        return [self._mapper.db_model_to_currency(model) for model in models]

    async def invalidate(self) -> None:
        """The table is the source of truth, there is nothing to drop here."""
        return None

    @staticmethod
    def _observe(operation: str, start_time: float, row_count: int) -> None:
        duration = time.time() - start_time

        logger.debug(
            "postgres_query",
            operation=operation,
            row_count=row_count,
            duration_ms=round(duration * 1000, 2),
        )

        if settings.ENABLE_METRICS:
            metrics = get_metrics_registry()
            metrics.db_queries_total.labels(
                operation=operation, table="currencies"
            ).inc()
            metrics.db_query_duration_seconds.labels(
                operation=operation, table="currencies"
            ).observe(duration)
