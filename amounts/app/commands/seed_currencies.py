from collections.abc import Iterable
from typing import Optional

from amounts.app.ports.outbound.currency_source import CurrencyWriter
from amounts.app.services.currency_metadata_store import CurrencyMetadataStore
from amounts.domain.models import Currency
from amounts.domain.models.catalogue import CURRENCY_CATALOGUE
from amounts.shared.logging import get_logger

logger = get_logger(__name__)


class SeedCurrenciesCommandHandler:
    def __init__(
        self,
        currency_writer: CurrencyWriter,
        metadata_store: CurrencyMetadataStore,
    ):
        self._writer = currency_writer
        self._store = metadata_store

    async def handle(self, currencies: Optional[Iterable[Currency]] = None) -> int:
        """
        Upsert currencies (the built-in catalogue by default) and invalidate
        every cached precision map, so new decimals are picked up.

        :return: Number of currencies written
        :raises CurrencyStorageError: If the batch could not be written
        """
        batch = list(CURRENCY_CATALOGUE if currencies is None else currencies)

        await self._writer.save_batch(batch)
        await self._store.invalidate_cache()

        logger.info("currencies_seeded", currency_count=len(batch))

        return len(batch)
