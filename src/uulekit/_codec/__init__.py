"""Framing primitives shared by the UULE codecs."""

from __future__ import annotations

from uulekit._codec.base64url import urlsafe_b64decode, urlsafe_b64encode
from uulekit._codec.fields import iter_lines, parse_bounded_int

__all__ = [
    "iter_lines",
    "parse_bounded_int",
    "urlsafe_b64decode",
    "urlsafe_b64encode",
]
