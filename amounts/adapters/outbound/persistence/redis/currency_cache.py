import json
from typing import Any, Optional

import redis.asyncio as redis

from amounts.app.ports.outbound.currency_source import CurrencyMetadataCache
from amounts.domain.models import Currency
from amounts.shared.config import get_settings
from amounts.shared.logging import get_logger
from amounts.shared.observability import get_metrics_registry

from .mapper import RedisMapper
from .models import RedisCurrency, decimals_map_from_dict

logger = get_logger(__name__)
settings = get_settings()

DECIMALS_KEY = "currencies:decimals"
CURRENCIES_KEY = "currencies:all"


# Essentially an unreliable cache layer.
# It's good if it works, it's fine if it doesn't.
class RedisCurrencyCache(CurrencyMetadataCache):
    def __init__(self, redis_client: redis.Redis, ttl_seconds: int = 3600):
        self._redis = redis_client
        self._mapper = RedisMapper()
        self._ttl = ttl_seconds

    async def get_decimals_map(self) -> Optional[dict[str, int]]:
        payload = await self._get(DECIMALS_KEY)

        if payload is None:
            return None

        try:
            return decimals_map_from_dict(payload)
        except ValueError as e:
            logger.warning("redis_payload_invalid", key=DECIMALS_KEY, error=str(e))
            return None

    async def save_decimals_map(self, decimals: dict[str, int]) -> None:
        await self._set(DECIMALS_KEY, decimals)

    async def get_currencies(self) -> Optional[list[Currency]]:
        payload = await self._get(CURRENCIES_KEY)

        if payload is None:
            return None

        try:
            return [
                self._mapper.map_cached_to_currency(RedisCurrency.from_dict(item))
                for item in payload
            ]
        except (ValueError, TypeError) as e:
            logger.warning("redis_payload_invalid", key=CURRENCIES_KEY, error=str(e))
            return None

    async def save_currencies(self, currencies: list[Currency]) -> None:
        payload = [self._mapper.map_currency_to_cached(c).to_dict() for c in currencies]
        await self._set(CURRENCIES_KEY, payload)

    async def invalidate(self) -> None:
        # Errors propagate to the caller, unlike reads and writes.
        await self._redis.delete(DECIMALS_KEY, CURRENCIES_KEY)
        logger.debug("redis_currency_cache_invalidated")

    async def _get(self, key: str) -> Optional[Any]:
        try:
            data = await self._redis.get(key)

            if not data:
                logger.debug("redis_cache_miss", key=key)

                if settings.ENABLE_METRICS:
                    metrics = get_metrics_registry()
                    metrics.cache_misses_total.labels(cache_type="redis").inc()

                return None

            payload = json.loads(data)

            logger.debug("redis_cache_hit", key=key)

            if settings.ENABLE_METRICS:
                metrics = get_metrics_registry()
                metrics.cache_hits_total.labels(cache_type="redis").inc()

            return payload

        except Exception as e:
            logger.warning("redis_get_failed", key=key, error=str(e))
            return None

    async def _set(self, key: str, payload: Any) -> None:
        try:
            await self._redis.setex(key, self._ttl, json.dumps(payload))
            logger.debug("redis_cached", key=key, ttl_seconds=self._ttl)

        except Exception as e:
            # Yep, we're silencing them.
            # It's just a cache layer anyway, it's fine if it fails.
            logger.error(
                "redis_cache_failed",
                key=key,
                error=str(e),
                exc_info=True,
            )
