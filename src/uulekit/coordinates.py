"""Fixed-point ("e7") latitude/longitude conversion.

UULEv2 carries coordinates as integers holding degrees scaled by 10^7.
Converting back is exact division; converting forward rounds half away from
zero, so a value survives a round trip to within 5e-8 degrees.
"""

from __future__ import annotations

import math

from uulekit._constants import E7_FACTOR, I64_MAX, I64_MIN
from uulekit.exceptions import UuleInvalidFloatError


def coordinate_to_e7(degrees: float) -> int:
    """Convert a latitude or longitude in degrees to its e7 integer.

    Results outside the signed 64-bit range saturate at its bounds and NaN
    maps to 0, like a float to i64 cast.

    >>> coordinate_to_e7(37.421)
    374210000
    >>> coordinate_to_e7(-12.2084)
    -122084000
    """
    scaled = float(degrees) * E7_FACTOR
    if math.isnan(scaled):
        return 0
    if scaled >= I64_MAX:
        return I64_MAX
    if scaled <= I64_MIN:
        return I64_MIN
    return int(math.copysign(math.floor(abs(scaled) + 0.5), scaled))


def coordinate_from_e7(e7: int) -> float:
    """Convert an e7 integer back to degrees.

    >>> coordinate_from_e7(374210000)
    37.421
    """
    return e7 / float(E7_FACTOR)


def parse_degrees(text: str) -> float:
    """Parse a decimal degree string such as ``"40.730610"``.

    Raises :class:`UuleInvalidFloatError` for non-numeric, NaN or infinite input.
    """
    try:
        value = float(text.strip())
    except (TypeError, ValueError) as exc:
        raise UuleInvalidFloatError(str(text)) from exc
    if not math.isfinite(value):
        raise UuleInvalidFloatError(str(text))
    return value
