from amounts.adapters.outbound.persistence.redis.models import RedisCurrency
from amounts.domain.models import Currency


class RedisMapper:
    @staticmethod
    def map_cached_to_currency(cached: RedisCurrency) -> Currency:
        return Currency(
            code=cached.code,
            name=cached.name,
            symbol=cached.symbol,
            decimals=cached.decimals,
            is_active=cached.is_active,
        )

    @staticmethod
    def map_currency_to_cached(currency: Currency) -> RedisCurrency:
        return RedisCurrency(
            code=currency.code,
            name=currency.name,
            symbol=currency.symbol,
            decimals=currency.decimals,
            is_active=currency.is_active,
        )
