from __future__ import annotations

import pytest

from uulekit.coordinates import coordinate_from_e7, coordinate_to_e7, parse_degrees
from uulekit.exceptions import UuleDecodeError, UuleError, UuleInvalidFloatError


@pytest.mark.parametrize(
    ("degrees", "e7"),
    [
        (37.421, 374210000),
        (-12.2084, -122084000),
        (40.730610, 407306100),
        (-73.9352420, -739352420),
        (0.0, 0),
        (180.0, 1800000000),
        (-180.0, -1800000000),
    ],
)
def test_coordinate_to_e7_known_values(degrees: float, e7: int) -> None:
    assert coordinate_to_e7(degrees) == e7


@pytest.mark.parametrize(
    ("e7", "degrees"),
    [
        (374210000, 37.421),
        (-122084000, -12.2084),
        (407306100, 40.730610),
        (-739352420, -73.9352420),
    ],
)
def test_coordinate_from_e7_is_exact_division(e7: int, degrees: float) -> None:
    assert coordinate_from_e7(e7) == degrees


def test_coordinate_to_e7_rounds_instead_of_truncating() -> None:
    assert coordinate_to_e7(1.23456789) == 12345679
    assert coordinate_to_e7(-1.23456789) == -12345679
    assert coordinate_to_e7(0.00000004) == 0


@pytest.mark.parametrize("degrees", [0.123456789, -89.99999999, 179.98765432, -0.00000001, 51.5073509])
def test_coordinate_round_trip_within_tolerance(degrees: float) -> None:
    assert abs(coordinate_from_e7(coordinate_to_e7(degrees)) - degrees) <= 5e-8


def test_parse_degrees_accepts_decimal_strings() -> None:
    assert parse_degrees(" 40.730610 ") == 40.730610
    assert parse_degrees("-73") == -73.0


@pytest.mark.parametrize("text", ["", "north", "nan", "inf", "1,5"])
def test_parse_degrees_rejects_non_finite_or_garbage(text: str) -> None:
    with pytest.raises(UuleInvalidFloatError) as excinfo:
        parse_degrees(text)
    assert excinfo.value.value == text


def test_coordinate_to_e7_saturates_at_int64_bounds() -> None:
    assert coordinate_to_e7(1e12) == 2**63 - 1
    assert coordinate_to_e7(-1e12) == -(2**63)
    assert coordinate_to_e7(float("inf")) == 2**63 - 1
    assert coordinate_to_e7(float("nan")) == 0


def test_invalid_float_is_a_value_error_not_a_decode_error() -> None:
    with pytest.raises(ValueError):
        parse_degrees("north")
    assert not issubclass(UuleInvalidFloatError, UuleDecodeError)
    assert issubclass(UuleInvalidFloatError, UuleError)
