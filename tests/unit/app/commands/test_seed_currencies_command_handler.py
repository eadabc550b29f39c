import pytest

from amounts.app.commands.seed_currencies import SeedCurrenciesCommandHandler
from amounts.app.ports.outbound.currency_source import CurrencySource, CurrencyWriter
from amounts.app.services import CurrencyMetadataStore
from amounts.domain.exceptions.currency import CurrencyStorageError
from amounts.domain.models import Currency
from amounts.domain.models.catalogue import CURRENCY_CATALOGUE


class MockWriter(CurrencyWriter):
    def __init__(self, error=None):
        self.saved_batches: list[list[Currency]] = []
        self._error = error

    async def save_batch(self, currencies: list[Currency]) -> None:
        if self._error is not None:
            raise self._error
        self.saved_batches.append(currencies)


class TableSource(CurrencySource):
    """Reads back whatever the writer stored."""

    def __init__(self, writer: MockWriter):
        self._writer = writer
        self.invalidated = 0

    async def fetch_decimals_map(self):
        rows = [c for batch in self._writer.saved_batches for c in batch]
        return {c.code: c.decimals for c in rows}

    async def fetch_active_currencies(self):
        return []

    async def invalidate(self):
        self.invalidated += 1


@pytest.mark.asyncio
async def test_seed_writes_catalogue_by_default():
    # Given
    writer = MockWriter()
    source = TableSource(writer)
    handler = SeedCurrenciesCommandHandler(
        currency_writer=writer, metadata_store=CurrencyMetadataStore(source)
    )

    # When
    count = await handler.handle()

    # Then
    assert count == len(CURRENCY_CATALOGUE)
    assert writer.saved_batches == [list(CURRENCY_CATALOGUE)]
    assert source.invalidated == 1


@pytest.mark.asyncio
async def test_seed_invalidates_cached_precision():
    # Given
    writer = MockWriter()
    source = TableSource(writer)
    store = CurrencyMetadataStore(source)
    handler = SeedCurrenciesCommandHandler(currency_writer=writer, metadata_store=store)

    assert await store.get_decimals("XTS") == 2

    # When
    await handler.handle([Currency("XTS", "Testing Code", "T", 4)])

    # Then
    assert await store.get_decimals("XTS") == 4


@pytest.mark.asyncio
async def test_seed_failure_propagates_without_invalidating():
    writer = MockWriter(error=CurrencyStorageError("save_batch", "db down"))
    source = TableSource(writer)
    handler = SeedCurrenciesCommandHandler(
        currency_writer=writer, metadata_store=CurrencyMetadataStore(source)
    )

    with pytest.raises(CurrencyStorageError):
        await handler.handle()

    assert source.invalidated == 0
