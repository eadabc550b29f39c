from decimal import ROUND_HALF_EVEN, Decimal

import pytest

from amounts.domain.services.precision_service import (
    PrecisionPolicy,
    PrecisionService,
)


def test_major_to_minor_rounds_half_away_from_zero():
    svc = PrecisionService(PrecisionPolicy())

    assert svc.major_to_minor(Decimal("0.125"), 2) == 13
    assert svc.major_to_minor(Decimal("12.345"), 2) == 1235
    assert svc.major_to_minor(Decimal("-12.345"), 2) == -1235
    assert svc.major_to_minor(Decimal("0.5"), 0) == 1
    assert svc.major_to_minor(Decimal("-0.5"), 0) == -1
    assert svc.major_to_minor(Decimal("0.0005"), 3) == 1


def test_major_to_minor_below_half_rounds_toward_zero():
    svc = PrecisionService()

    assert svc.major_to_minor(Decimal("12.344"), 2) == 1234
    assert svc.major_to_minor(Decimal("-12.344"), 2) == -1234
    assert svc.major_to_minor(Decimal("0.4"), 0) == 0


def test_major_to_minor_uses_decimal_string_of_floats():
    svc = PrecisionService()

    # 1.005 is 1.00499999... in binary, str() keeps the written value
    assert svc.major_to_minor(1.005, 2) == 101
    assert svc.major_to_minor(12.34, 2) == 1234
    assert svc.major_to_minor(0.1 + 0.2, 2) == 30


def test_major_to_minor_accepts_ints_and_numeric_strings():
    svc = PrecisionService()

    assert svc.major_to_minor(12, 2) == 1200
    assert svc.major_to_minor("12.34", 2) == 1234
    assert svc.major_to_minor(" 7.5 ", 0) == 8
    assert svc.major_to_minor(1234, 0) == 1234


def test_minor_to_major_is_exact():
    svc = PrecisionService()

    assert svc.minor_to_major(1234, 2) == Decimal("12.34")
    assert svc.minor_to_major(1234, 0) == Decimal("1234")
    assert svc.minor_to_major(1234, 3) == Decimal("1.234")
    assert svc.minor_to_major(-5, 2) == Decimal("-0.05")


def test_minor_to_major_keeps_every_digit_of_huge_amounts():
    svc = PrecisionService()
    minor = 10**40 + 1

    major = svc.minor_to_major(minor, 2)

    assert major == Decimal("100000000000000000000000000000000000000.01")
    assert svc.major_to_minor(major, 2) == minor


def test_shift_moves_decimal_point_without_rounding():
    value = Decimal("123456789012345678901234567890.123456789")

    assert PrecisionService.shift(value, 3) == Decimal(
        "123456789012345678901234567890123.456789"
    )
    assert PrecisionService.shift(value, 0) is value
    assert PrecisionService.shift(Decimal("1"), -2) == Decimal("0.01")


def test_multiplier_is_power_of_ten():
    assert PrecisionService.multiplier(0) == 1
    assert PrecisionService.multiplier(2) == 100
    assert PrecisionService.multiplier(3) == 1000


@pytest.mark.parametrize(
    "value",
    [True, False, None, "abc", "", float("nan"), float("inf"), "Infinity", [1], object()],
)
def test_to_decimal_rejects_non_amounts(value):
    with pytest.raises(ValueError):
        PrecisionService.to_decimal(value)


def test_is_whole():
    assert PrecisionService.is_whole(Decimal("100")) is True
    assert PrecisionService.is_whole(Decimal("100.00")) is True
    assert PrecisionService.is_whole(Decimal("100.5")) is False


def test_policy_rounding_mode_is_respected():
    svc = PrecisionService(PrecisionPolicy(rounding_mode=ROUND_HALF_EVEN))

    assert svc.policy.rounding_mode == ROUND_HALF_EVEN
    assert svc.major_to_minor(Decimal("0.125"), 2) == 12


def test_major_to_minor_beyond_max_digits_raises_value_error():
    svc = PrecisionService(PrecisionPolicy(max_digits=10))

    assert svc.major_to_minor(Decimal("12345678.90"), 2) == 1234567890

    with pytest.raises(ValueError, match="10 digits"):
        svc.major_to_minor(Decimal("123456789.01"), 2)

    with pytest.raises(ValueError):
        PrecisionService().major_to_minor(Decimal("1e70"), 2)
