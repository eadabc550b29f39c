from dataclasses import dataclass

from amounts.app.ports.outbound.currency_source import CurrencySource
from amounts.app.services.currency_metadata_store import CurrencyMetadataStore
from amounts.domain.exceptions.currency import CurrencyNotFoundError
from amounts.domain.models import Currency
from amounts.domain.values import CurrencyCode


@dataclass(frozen=True)
class CurrencyDecimals:
    code: str
    decimals: int


class GetCurrenciesQueryHandler:
    def __init__(
        self,
        currency_source: CurrencySource,
        metadata_store: CurrencyMetadataStore,
    ):
        self._source = currency_source
        self._store = metadata_store

    async def list_active(self) -> list[Currency]:
        currencies = await self._source.fetch_active_currencies()
        return sorted(currencies, key=lambda c: c.name)

    async def get_by_code(self, code: str) -> Currency:
        """
        Look up an active currency.

        :raises CurrencyNotFoundError: If no active currency has this code
        """
        canonical = CurrencyCode.canonicalize(code)

        for currency in await self._source.fetch_active_currencies():
            if currency.code == canonical:
                return currency

        raise CurrencyNotFoundError(canonical)

    async def get_decimals(self, code: str) -> CurrencyDecimals:
        canonical = CurrencyCode.canonicalize(code)
        decimals = await self._store.get_decimals(canonical)

        return CurrencyDecimals(code=canonical, decimals=decimals)
