"""UULEv2: textual location record with latitude, longitude and radius.

The token is ``a+`` followed by the unpadded base64-URL encoding of::

    role:1
    producer:12
    provenance:0
    timestamp:1591521249034000
    latlng{
    latitude_e7:374210000
    longitude_e7:-122084000
    }
    radius:-1

Lines are parsed strictly in this order.  A value is everything after the
first colon, so a value that itself contains a colon cannot be decoded.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from typing import ClassVar

from pydantic import Field

from uulekit._codec import iter_lines, parse_bounded_int, urlsafe_b64decode, urlsafe_b64encode
from uulekit._constants import (
    DEFAULT_PROVENANCE,
    EXACT_POINT_RADIUS,
    I32_MAX,
    I32_MIN,
    I64_MAX,
    I64_MIN,
    LOGGED_IN_USER_SPECIFIED,
    U8_MAX,
    U128_MAX,
    USER_SPECIFIED_FOR_REQUEST,
    V2_PREFIX,
)
from uulekit.coordinates import coordinate_from_e7, coordinate_to_e7
from uulekit.exceptions import (
    UuleMissingValueError,
    UuleUnexpectedEndError,
    UuleUnexpectedLineError,
    UuleUtf8Error,
)
from uulekit.models._base import UuleRecord

_logger = logging.getLogger(__name__)

_LATLNG_OPEN = "latlng{"
_LATLNG_CLOSE = "}"


def wall_clock_millis() -> int:
    """Return the current Unix time in milliseconds."""
    return time.time_ns() // 1_000_000


class UulevTwoRecord(UuleRecord):
    """Location encoded as a UULEv2 token.

    Only ``lat``, ``long`` and possibly ``radius`` are known to matter; the
    other fields are undocumented and kept opaquely.

    Parameters
    ----------
    role : int
        Unsigned byte, default 1 (``USER_SPECIFIED_FOR_REQUEST``).
    producer : int
        Unsigned byte, default 12 (``LOGGED_IN_USER_SPECIFIED``).
    provenance : int
        Signed 32-bit, meaning unknown, default 0.
    timestamp : int
        Unix epoch milliseconds, defaults to the time of construction.
    lat, long : float
        Degrees, default 0.0.  Encoded with 7 decimal places.
    radius : int
        Signed 32-bit, ``-1`` for an exact point.  Observed units are
        meters x 620; see :func:`uulekit.meters_to_radius`.
    """

    PREFIX: ClassVar[str] = V2_PREFIX
    VERSION: ClassVar[int] = 2

    role: int = Field(default=USER_SPECIFIED_FOR_REQUEST, ge=0, le=U8_MAX)
    producer: int = Field(default=LOGGED_IN_USER_SPECIFIED, ge=0, le=U8_MAX)
    provenance: int = Field(default=DEFAULT_PROVENANCE, ge=I32_MIN, le=I32_MAX)
    timestamp: int = Field(default_factory=wall_clock_millis, ge=0, le=U128_MAX)
    lat: float = Field(default=0.0, allow_inf_nan=False)
    long: float = Field(default=0.0, allow_inf_nan=False)
    radius: int = Field(default=EXACT_POINT_RADIUS, ge=I32_MIN, le=I32_MAX)

    @classmethod
    def default(cls, clock: Callable[[], int] | None = None) -> UulevTwoRecord:
        """Build a record with default fields, stamped by *clock*.

        *clock* returns Unix epoch milliseconds and defaults to the system
        wall clock.
        """
        now = (clock or wall_clock_millis)()
        return cls(timestamp=now)

    def with_lat(self, lat: float) -> UulevTwoRecord:
        return self._replace(lat=lat)

    def with_long(self, long: float) -> UulevTwoRecord:
        return self._replace(long=long)

    def with_radius(self, radius: int) -> UulevTwoRecord:
        return self._replace(radius=radius)

    def with_timestamp(self, timestamp: int) -> UulevTwoRecord:
        return self._replace(timestamp=timestamp)

    def _replace(self, **changes: object) -> UulevTwoRecord:
        # model_copy(update=...) skips validation
        return type(self).model_validate({**self.model_dump(), **changes})

    def to_text(self) -> str:
        """Render the intermediate text form that gets base64-URL encoded."""
        return "\n".join(
            [
                f"role:{self.role}",
                f"producer:{self.producer}",
                f"provenance:{self.provenance}",
                f"timestamp:{self.timestamp}",
                _LATLNG_OPEN,
                f"latitude_e7:{coordinate_to_e7(self.lat)}",
                f"longitude_e7:{coordinate_to_e7(self.long)}",
                _LATLNG_CLOSE,
                f"radius:{self.radius}",
            ]
        )

    def __str__(self) -> str:
        return self.to_text()

    def encode(self) -> str:
        """Encode the record as an ``a+`` token."""
        return V2_PREFIX + urlsafe_b64encode(self.to_text().encode("utf-8"))

    @classmethod
    def decode(cls, token: str) -> UulevTwoRecord:
        """Decode an ``a+`` token.

        Raises
        ------
        UuleInvalidPrefixError
            If *token* does not start with ``a+``.
        UuleBase64Error
            If the payload is not base64-URL.
        UuleUtf8Error
            If the payload is not UTF-8 text.
        UuleUnexpectedEndError, UuleUnexpectedLineError, UuleMissingValueError
            If the text does not follow the field layout.
        UuleInvalidIntegerError
            If a field value is not an integer in the field's range.
        """
        data = urlsafe_b64decode(cls._strip_prefix(token))
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise UuleUtf8Error(f"Invalid UTF-8 string. Underlying error: {exc}") from exc
        return cls.from_text(text)

    @classmethod
    def from_text(cls, text: str) -> UulevTwoRecord:
        """Parse the intermediate text form produced by :meth:`to_text`."""
        lines = iter_lines(text)

        role = _read_int(lines, "role", 0, U8_MAX)
        producer = _read_int(lines, "producer", 0, U8_MAX)
        provenance = _read_int(lines, "provenance", I32_MIN, I32_MAX)
        timestamp = _read_int(lines, "timestamp", 0, U128_MAX)
        _expect_literal(lines, _LATLNG_OPEN)
        lat = coordinate_from_e7(_read_int(lines, "latitude_e7", I64_MIN, I64_MAX))
        long = coordinate_from_e7(_read_int(lines, "longitude_e7", I64_MIN, I64_MAX))
        _expect_literal(lines, _LATLNG_CLOSE)
        radius = _read_int(lines, "radius", I32_MIN, I32_MAX)

        _logger.debug("Decoded UULEv2 record lat=%s long=%s radius=%s", lat, long, radius)
        return cls(
            role=role,
            producer=producer,
            provenance=provenance,
            timestamp=timestamp,
            lat=lat,
            long=long,
            radius=radius,
        )


def _next_line(lines: Iterator[str], expected: str) -> str:
    line = next(lines, None)
    if line is None:
        raise UuleUnexpectedEndError(expected)
    return line


def _expect_literal(lines: Iterator[str], literal: str) -> None:
    line = _next_line(lines, literal)
    if line != literal:
        raise UuleUnexpectedLineError(expected=literal, actual=line)


def _field_value(lines: Iterator[str], field: str) -> str:
    line = _next_line(lines, field)
    name, sep, value = line.partition(":")
    if name != field:
        raise UuleUnexpectedLineError(expected=field, actual=line)
    if not sep or not value:
        raise UuleMissingValueError(field)
    return value


def _read_int(lines: Iterator[str], field: str, minimum: int, maximum: int) -> int:
    return parse_bounded_int(_field_value(lines, field), field=field, minimum=minimum, maximum=maximum)
