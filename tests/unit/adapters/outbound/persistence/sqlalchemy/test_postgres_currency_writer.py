import pytest
from sqlalchemy.dialects import postgresql

from amounts.adapters.outbound.persistence.sqlalchemy.currency_writer import (
    PostgresCurrencyWriter,
)
from amounts.adapters.outbound.persistence.sqlalchemy.mapper import SQLAlchemyMapper
from amounts.adapters.outbound.persistence.sqlalchemy.models import CurrencyModel
from amounts.domain.exceptions.currency import CurrencyStorageError
from amounts.domain.models import Currency


class DummyBegin:
    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class DummySession:
    def __init__(self, error: Exception = None):
        self.executed = []
        self.begins = 0
        self._error = error

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    def begin(self):
        self.begins += 1
        return DummyBegin()

    async def execute(self, stmt):
        if self._error is not None:
            raise self._error

        self.executed.append(stmt)


def _currencies():
    return [
        Currency("USD", "US Dollar", "$", 2),
        Currency("JPY", "Japanese Yen", "¥", 0),
    ]


@pytest.mark.asyncio
async def test_save_batch_executes_single_upsert():
    # Given
    session = DummySession()
    writer = PostgresCurrencyWriter(session_factory=lambda: session)

    # When
    await writer.save_batch(_currencies())

    # Then
    assert len(session.executed) == 1
    assert session.begins == 1

    sql = str(session.executed[0].compile(dialect=postgresql.dialect()))
    assert "ON CONFLICT (code) DO UPDATE" in sql


@pytest.mark.asyncio
async def test_save_batch_with_empty_list_does_nothing():
    session = DummySession()
    writer = PostgresCurrencyWriter(session_factory=lambda: session)

    await writer.save_batch([])

    assert session.executed == []
    assert session.begins == 0


@pytest.mark.asyncio
async def test_save_batch_wraps_errors():
    session = DummySession(error=RuntimeError("deadlock detected"))
    writer = PostgresCurrencyWriter(session_factory=lambda: session)

    with pytest.raises(CurrencyStorageError) as exc_info:
        await writer.save_batch(_currencies())

    assert exc_info.value.operation == "save_batch"
    assert "deadlock detected" in str(exc_info.value)


def test_mapper_round_trip_through_model():
    currency = Currency("BHD", "Bahraini Dinar", "BD", 3, is_active=False)

    model = CurrencyModel(**SQLAlchemyMapper.currency_to_dict(currency))

    assert SQLAlchemyMapper.db_model_to_currency(model) == currency
