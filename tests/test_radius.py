from __future__ import annotations

import pytest

from uulekit import meters_to_radius, radius_to_meters


def test_meters_to_radius_applies_observed_scale() -> None:
    assert meters_to_radius(10) == 6200
    assert meters_to_radius(0.5) == 310


def test_radius_to_meters_inverts_scale() -> None:
    assert radius_to_meters(6200) == 10.0
    assert radius_to_meters(-1) is None


def test_meters_to_radius_rejects_invalid_values() -> None:
    with pytest.raises(ValueError):
        meters_to_radius(-1)
    with pytest.raises(ValueError):
        meters_to_radius(10_000_000)


@pytest.mark.parametrize("meters", [float("inf"), float("-inf"), float("nan")])
def test_meters_to_radius_rejects_non_finite_values(meters: float) -> None:
    with pytest.raises(ValueError, match="finite"):
        meters_to_radius(meters)
