"""Unpadded base64-URL encoding used by both UULE generations."""

from __future__ import annotations

import base64
import binascii
import re

from uulekit.exceptions import UuleBase64Error

_INVALID_CHAR_RE = re.compile(r"[^A-Za-z0-9_-]")


def urlsafe_b64encode(data: bytes) -> str:
    """Encode *data* with the URL-safe alphabet and strip ``=`` padding."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def urlsafe_b64decode(text: str) -> bytes:
    """Decode unpadded (or padded) base64-URL text.

    Unlike :func:`base64.urlsafe_b64decode`, characters outside the URL-safe
    alphabet are rejected instead of silently discarded, so a token with
    trailing whitespace or a ``+``/``/`` from the standard alphabet fails.
    Non-zero padding bits in the last character are rejected as well, so
    every byte string has exactly one accepted encoding.

    Raises
    ------
    UuleBase64Error
        If *text* is not valid base64-URL.
    """
    cleaned = text.rstrip("=")
    bad = _INVALID_CHAR_RE.search(cleaned)
    if bad is not None:
        raise UuleBase64Error(
            f"Invalid Base64-URL string. Invalid character {bad.group()!r} at offset {bad.start()}"
        )

    padded = cleaned
    remainder = len(padded) % 4
    if remainder:
        padded += "=" * (4 - remainder)
    try:
        data = base64.b64decode(padded, altchars=b"-_", validate=True)
    except binascii.Error as exc:
        raise UuleBase64Error(f"Invalid Base64-URL string. Underlying error: {exc}") from exc

    if urlsafe_b64encode(data) != cleaned:
        raise UuleBase64Error(
            f"Invalid Base64-URL string. Non-zero trailing bits in last character {cleaned[-1]!r}"
        )
    return data
