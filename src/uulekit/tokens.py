"""Decode a UULE token of either generation."""

from __future__ import annotations

from uulekit._constants import V1_PREFIX, V2_PREFIX
from uulekit.exceptions import UuleInvalidPrefixError
from uulekit.models import UulevOneRecord, UulevTwoRecord


def decode_token(token: str) -> UulevOneRecord | UulevTwoRecord:
    """Decode *token*, choosing UULEv1 or UULEv2 from its prefix.

    Raises :class:`UuleInvalidPrefixError` when the token starts with
    neither ``w+`` nor ``a+``; other decode errors propagate unchanged.
    """
    if token.startswith(V1_PREFIX):
        return UulevOneRecord.decode(token)
    if token.startswith(V2_PREFIX):
        return UulevTwoRecord.decode(token)
    raise UuleInvalidPrefixError(token, expected=f"{V1_PREFIX} or {V2_PREFIX}")
