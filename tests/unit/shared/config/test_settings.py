import pytest

from amounts.shared.config import get_settings


def _reset_settings_cache():
    get_settings.cache_clear()


def test_settings_validate_log_level_and_db_url(monkeypatch):
    # Given
    _reset_settings_cache()
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@h/db")

    # When
    s = get_settings()

    # Then
    assert s.LOG_LEVEL == "DEBUG"
    assert str(s.DATABASE_URL).startswith("postgresql+asyncpg://")


def test_settings_defaults():
    _reset_settings_cache()

    s = get_settings()

    assert s.CURRENCY_SOURCE_TIMEOUT_SECONDS == 5.0
    assert s.CURRENCY_SOURCE_RETRY_ATTEMPTS == 2
    assert s.DEFAULT_LOCALE == "en_US"
    assert s.PRECISION_MAP_MAX_AGE_SECONDS == 300


def test_settings_rejects_sync_db_driver(monkeypatch):
    # Given
    _reset_settings_cache()
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@h/db")

    # When & Then
    with pytest.raises(Exception):
        get_settings()


def test_settings_rejects_unknown_log_level(monkeypatch):
    _reset_settings_cache()
    monkeypatch.setenv("LOG_LEVEL", "VERBOSE")

    with pytest.raises(Exception):
        get_settings()


def test_settings_fallback_retry_must_not_exceed_cache_ttl(monkeypatch):
    # Given
    _reset_settings_cache()
    monkeypatch.setenv("CURRENCY_CACHE_TTL_SECONDS", "60")
    monkeypatch.setenv("FALLBACK_RETRY_SECONDS", "120")

    # When & Then
    with pytest.raises(Exception):
        get_settings()


@pytest.mark.parametrize(
    "name,value",
    [
        ("CURRENCY_SOURCE_TIMEOUT_SECONDS", "0.5"),
        ("CURRENCY_SOURCE_TIMEOUT_SECONDS", "31"),
        ("CURRENCY_SOURCE_RETRY_ATTEMPTS", "0"),
        ("CURRENCY_CACHE_TTL_SECONDS", "10"),
        ("PRECISION_MAP_MAX_AGE_SECONDS", "0"),
    ],
)
def test_settings_bounds(monkeypatch, name, value):
    _reset_settings_cache()
    monkeypatch.setenv(name, value)

    with pytest.raises(Exception):
        get_settings()
