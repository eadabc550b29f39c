import pytest

from amounts.domain.values import (
    DEFAULT_DECIMALS,
    FALLBACK_DECIMALS,
    CurrencyCode,
    PrecisionMap,
)


def test_canonicalize_trims_and_uppercases():
    assert CurrencyCode.canonicalize(" usd ") == "USD"
    assert CurrencyCode.canonicalize("Jpy") == "JPY"
    assert CurrencyCode.canonicalize(None) == ""
    assert CurrencyCode.canonicalize("x1") == "X1"


def test_precision_map_canonicalizes_keys():
    # Given
    pm = PrecisionMap({"usd": 2, " jpy": 0})

    # Then
    assert pm["USD"] == 2
    assert pm["JPY"] == 0
    assert len(pm) == 2
    assert set(pm) == {"USD", "JPY"}


def test_precision_map_is_read_only():
    pm = PrecisionMap({"USD": 2})

    with pytest.raises(TypeError):
        pm["USD"] = 3  # type: ignore[index]


def test_precision_map_is_independent_of_input_dict():
    # Given
    raw = {"USD": 2}
    pm = PrecisionMap(raw)

    # When
    raw["USD"] = 5
    raw["EUR"] = 2

    # Then
    assert pm["USD"] == 2
    assert "EUR" not in pm


@pytest.mark.parametrize(
    "data",
    [
        {"USD": -1},
        {"USD": "2"},
        {"USD": True},
        {"USD": None},
        {"USD": 2.0},
        {"": 2},
    ],
)
def test_precision_map_rejects_malformed_entries(data):
    with pytest.raises(ValueError):
        PrecisionMap(data)


def test_empty_precision_map():
    assert len(PrecisionMap()) == 0
    assert len(PrecisionMap({})) == 0


def test_fallback_table_contents():
    for code in ("JPY", "KRW", "VND", "UGX", "RWF"):
        assert FALLBACK_DECIMALS[code] == 0

    for code in ("BHD", "JOD", "KWD", "OMR", "TND"):
        assert FALLBACK_DECIMALS[code] == 3

    assert "USD" not in FALLBACK_DECIMALS
    assert DEFAULT_DECIMALS == 2
