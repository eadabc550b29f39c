import asyncio

import pytest
from fakeredis.aioredis import FakeRedis

from amounts.adapters.outbound.persistence.redis.currency_cache import (
    DECIMALS_KEY,
    RedisCurrencyCache,
)
from amounts.adapters.outbound.persistence.repositories.cached_currency_source import (
    CachedCurrencySource,
)
from amounts.app.ports.outbound.currency_source import CurrencySource
from amounts.app.services import CurrencyMetadataStore


class GatedDatabase(CurrencySource):
    """Stands in for Postgres: reads its rows, then blocks until released."""

    def __init__(self, decimals):
        self.decimals = decimals
        self.calls = 0
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def fetch_decimals_map(self):
        self.calls += 1
        rows = dict(self.decimals)
        self.started.set()
        await self.release.wait()
        return rows

    async def fetch_active_currencies(self):
        return []

    async def invalidate(self):
        pass


@pytest.mark.asyncio
async def test_invalidate_during_database_read_does_not_leave_stale_redis_copy():
    # Given
    redis = FakeRedis()
    db = GatedDatabase(decimals={"ABC": 2})
    store = CurrencyMetadataStore(
        CachedCurrencySource(cache=RedisCurrencyCache(redis_client=redis), fallback=db)
    )

    task = asyncio.create_task(store.get_decimals("ABC"))
    await db.started.wait()

    # When
    db.decimals = {"ABC": 4}
    await store.invalidate_cache()
    db.release.set()

    # Then
    assert await task == 2
    assert await redis.get(DECIMALS_KEY) is None

    assert await store.get_decimals("ABC") == 4
    assert db.calls == 2
    assert await redis.get(DECIMALS_KEY) is not None
