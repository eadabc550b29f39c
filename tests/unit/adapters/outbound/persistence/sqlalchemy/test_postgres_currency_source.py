import pytest
from sqlalchemy.exc import OperationalError

from amounts.adapters.outbound.persistence.sqlalchemy.currency_source import (
    PostgresCurrencySource,
)
from amounts.adapters.outbound.persistence.sqlalchemy.models import CurrencyModel
from amounts.domain.exceptions.currency import CurrencySourceUnavailableError


class MockScalars:
    def __init__(self, models):
        self._models = models

    def all(self):
        return list(self._models)


class MockResult:
    def __init__(self, rows=None, models=None):
        self._rows = rows or []
        self._models = models or []

    def all(self):
        return list(self._rows)

    def scalars(self):
        return MockScalars(self._models)


class MockSession:
    def __init__(self, result: MockResult, error: Exception = None):
        self._result = result
        self._error = error
        self.executed = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def execute(self, stmt):
        self.executed.append(stmt)

        if self._error is not None:
            raise self._error

        return self._result


def _session_factory_with(session: MockSession):
    def _factory():
        return session

    return _factory


def _model(code, name, symbol, decimals, is_active=True):
    return CurrencyModel(
        code=code, name=name, symbol=symbol, decimals=decimals, is_active=is_active
    )


@pytest.mark.asyncio
async def test_fetch_decimals_map_returns_every_row():
    # Given
    session = MockSession(MockResult(rows=[("USD", 2), ("JPY", 0), ("BHD", 3)]))
    source = PostgresCurrencySource(session_factory=_session_factory_with(session))

    # When
    decimals = await source.fetch_decimals_map()

    # Then
    assert decimals == {"USD": 2, "JPY": 0, "BHD": 3}
    assert len(session.executed) == 1


@pytest.mark.asyncio
async def test_fetch_decimals_map_empty_table():
    session = MockSession(MockResult(rows=[]))
    source = PostgresCurrencySource(session_factory=_session_factory_with(session))

    assert await source.fetch_decimals_map() == {}


@pytest.mark.asyncio
async def test_fetch_active_currencies_maps_models():
    # Given
    session = MockSession(
        MockResult(
            models=[
                _model("EUR", "Euro", "€", 2),
                _model("JPY", "Japanese Yen", "¥", 0),
            ]
        )
    )
    source = PostgresCurrencySource(session_factory=_session_factory_with(session))

    # When
    currencies = await source.fetch_active_currencies()

    # Then
    assert [c.code for c in currencies] == ["EUR", "JPY"]
    assert currencies[1].decimals == 0
    assert currencies[0].symbol == "€"


@pytest.mark.asyncio
async def test_database_errors_become_source_unavailable():
    # Given
    error = OperationalError("SELECT", {}, Exception("connection refused"))
    session = MockSession(MockResult(), error=error)
    source = PostgresCurrencySource(session_factory=_session_factory_with(session))

    # When / Then
    with pytest.raises(CurrencySourceUnavailableError) as exc_info:
        await source.fetch_decimals_map()

    assert exc_info.value.source_name == "Postgres"

    with pytest.raises(CurrencySourceUnavailableError):
        await source.fetch_active_currencies()


@pytest.mark.asyncio
async def test_connection_errors_become_source_unavailable():
    session = MockSession(MockResult(), error=ConnectionRefusedError("refused"))
    source = PostgresCurrencySource(session_factory=_session_factory_with(session))

    with pytest.raises(CurrencySourceUnavailableError):
        await source.fetch_decimals_map()


@pytest.mark.asyncio
async def test_invalidate_is_noop():
    session = MockSession(MockResult())
    source = PostgresCurrencySource(session_factory=_session_factory_with(session))

    await source.invalidate()

    assert session.executed == []
