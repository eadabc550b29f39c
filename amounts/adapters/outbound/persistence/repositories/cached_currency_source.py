from amounts.app.ports.outbound.currency_source import (
    CurrencyMetadataCache,
    CurrencySource,
)
from amounts.domain.models import Currency
from amounts.shared.logging import get_logger

logger = get_logger(__name__)


class CachedCurrencySource(CurrencySource):
    """
    Read-through source: Redis first, the database on a miss, written back after.

    A write-back is skipped when ``invalidate()`` ran while the database read
    was in flight, so rows read before the invalidation never reach Redis.
    """

    def __init__(self, cache: CurrencyMetadataCache, fallback: CurrencySource):
        self._cache = cache
        self._fallback = fallback
        self._generation = 0

    async def fetch_decimals_map(self) -> dict[str, int]:
        generation = self._generation
        decimals = await self._cache.get_decimals_map()

        if decimals is not None:
            return decimals

        decimals = await self._fallback.fetch_decimals_map()

        if generation == self._generation:
            await self._cache.save_decimals_map(decimals)
        else:
            logger.debug("currency_cache_write_skipped", key="decimals")

        return decimals

    async def fetch_active_currencies(self) -> list[Currency]:
        generation = self._generation
        currencies = await self._cache.get_currencies()

        if currencies is not None:
            return currencies

        currencies = await self._fallback.fetch_active_currencies()

        if generation == self._generation:
            await self._cache.save_currencies(currencies)
        else:
            logger.debug("currency_cache_write_skipped", key="currencies")

        return currencies

    async def invalidate(self) -> None:
        self._generation += 1
        await self._cache.invalidate()
        await self._fallback.invalidate()
