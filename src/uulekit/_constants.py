"""Internal constants shared across the library."""

from __future__ import annotations

import math

V1_PREFIX = "w+"
V2_PREFIX = "a+"

# ------------------------------------------------------------------
# UULEv1 field defaults and tags (observed, not documented by Google)
# ------------------------------------------------------------------

UULEV1_ROLE = 2
UULEV1_PRODUCER = 32

V1_ROLE_TAG = 0x08
V1_PRODUCER_TAG = 0x10
V1_NAME_TAG = 0x22
V1_HEADER_SIZE = 6
V1_MAX_NAME_BYTES = 0xFF

# ------------------------------------------------------------------
# UULEv2 field defaults
# ------------------------------------------------------------------

USER_SPECIFIED_FOR_REQUEST = 1
LOGGED_IN_USER_SPECIFIED = 12
DEFAULT_PROVENANCE = 0
EXACT_POINT_RADIUS = -1

E7_FACTOR = 10_000_000

# ------------------------------------------------------------------
# Integer ranges of the wire fields
# ------------------------------------------------------------------

U8_MAX = 2**8 - 1
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U128_MAX = 2**128 - 1

# ------------------------------------------------------------------
# UULEv2 radius scale  (meters -> encoded radius)
# ------------------------------------------------------------------

RADIUS_UNITS_PER_METER = 620


def meters_to_radius(meters: float) -> int:
    """Convert a radius in meters to the encoded UULEv2 ``radius`` value.

    The factor of 620 was found by experimentation and is not applied by the
    codec itself.

    Raises :class:`ValueError` if *meters* is negative or not finite, or if
    the result does not fit the signed 32-bit field.
    """
    value = float(meters)
    if not math.isfinite(value):
        raise ValueError(f"radius must be a finite number of meters, got {value}")
    if value < 0:
        raise ValueError(f"radius must be non-negative, got {value} m")
    radius = int(round(value * RADIUS_UNITS_PER_METER))
    if radius > I32_MAX:
        raise ValueError(f"radius of {value} m does not fit a 32-bit field")
    return radius


def radius_to_meters(radius: int) -> float | None:
    """Convert an encoded UULEv2 ``radius`` back to meters.

    Returns ``None`` for negative values, which mean "exact point".
    """
    if radius < 0:
        return None
    return radius / RADIUS_UNITS_PER_METER
