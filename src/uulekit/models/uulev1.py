"""UULEv1: tag-length-value encoding of a canonical place name.

Wire layout before base64-URL encoding::

    0x08 <role> 0x10 <producer> 0x22 <name length> <UTF-8 name bytes>

The token is the unpadded base64-URL text prefixed with ``w+``.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import Field

from uulekit._codec import urlsafe_b64decode, urlsafe_b64encode
from uulekit._constants import (
    U8_MAX,
    UULEV1_PRODUCER,
    UULEV1_ROLE,
    V1_HEADER_SIZE,
    V1_MAX_NAME_BYTES,
    V1_NAME_TAG,
    V1_PREFIX,
    V1_PRODUCER_TAG,
    V1_ROLE_TAG,
)
from uulekit.exceptions import UuleMalformedRecordError, UuleNameTooLongError, UuleUtf8Error
from uulekit.models._base import UuleRecord

_logger = logging.getLogger(__name__)


class UulevOneRecord(UuleRecord):
    """Named place encoded as a UULEv1 token.

    The meaning of ``role`` and ``producer`` is undocumented; the defaults
    (2 and 32) are the values seen in tokens produced by Google.

    Parameters
    ----------
    role : int
        Unsigned byte, default 2.
    producer : int
        Unsigned byte, default 32.
    canonical_name : str
        Place name, e.g. ``"Queens County,New York,United States"``.
        At most 255 UTF-8 bytes can be encoded.
    """

    PREFIX: ClassVar[str] = V1_PREFIX
    VERSION: ClassVar[int] = 1

    role: int = Field(default=UULEV1_ROLE, ge=0, le=U8_MAX)
    producer: int = Field(default=UULEV1_PRODUCER, ge=0, le=U8_MAX)
    canonical_name: str

    @classmethod
    def from_place(cls, name: str) -> UulevOneRecord:
        """Build a record for *name* with the default role and producer."""
        return cls(canonical_name=name)

    @classmethod
    def from_parts(cls, *parts: str | None) -> UulevOneRecord:
        """Build a record from place components such as city, region and country.

        Empty and ``None`` parts are skipped; the rest are trimmed and joined
        with commas, matching Google's canonical names.
        """
        cleaned = [str(part).strip() for part in parts if part is not None]
        cleaned = [part for part in cleaned if part]
        if not cleaned:
            raise ValueError("at least one non-empty place component is required")
        return cls.from_place(",".join(cleaned))

    def to_bytes(self) -> bytes:
        """Return the binary record before base64-URL encoding.

        Raises
        ------
        UuleNameTooLongError
            If the UTF-8 name is longer than 255 bytes.
        """
        name_bytes = self.canonical_name.encode("utf-8")
        if len(name_bytes) > V1_MAX_NAME_BYTES:
            raise UuleNameTooLongError(
                f"canonical name is {len(name_bytes)} UTF-8 bytes, at most {V1_MAX_NAME_BYTES} can be encoded",
                length=len(name_bytes),
            )
        header = bytes([V1_ROLE_TAG, self.role, V1_PRODUCER_TAG, self.producer, V1_NAME_TAG, len(name_bytes)])
        return header + name_bytes

    def encode(self) -> str:
        """Encode the record as a ``w+`` token."""
        return V1_PREFIX + urlsafe_b64encode(self.to_bytes())

    @classmethod
    def decode(cls, token: str) -> UulevOneRecord:
        """Decode a ``w+`` token.

        Raises
        ------
        UuleInvalidPrefixError
            If *token* does not start with ``w+``.
        UuleBase64Error
            If the payload is not base64-URL.
        UuleMalformedRecordError
            If the bytes are shorter than the header or the declared name.
        UuleUtf8Error
            If the name is not valid UTF-8.
        """
        data = urlsafe_b64decode(cls._strip_prefix(token))
        if len(data) < V1_HEADER_SIZE:
            raise UuleMalformedRecordError(
                f"UULEv1 record is {len(data)} bytes, header needs {V1_HEADER_SIZE}",
                length=len(data),
                required=V1_HEADER_SIZE,
            )

        if (data[0], data[2], data[4]) != (V1_ROLE_TAG, V1_PRODUCER_TAG, V1_NAME_TAG):
            _logger.debug("UULEv1 record has unexpected tag bytes %s", data[0:6:2].hex())

        name_len = data[5]
        end = V1_HEADER_SIZE + name_len
        if len(data) < end:
            raise UuleMalformedRecordError(
                f"UULEv1 record is {len(data)} bytes, declared name needs {end}",
                length=len(data),
                required=end,
            )

        try:
            name = data[V1_HEADER_SIZE:end].decode("utf-8")
        except UnicodeDecodeError as exc:
            raise UuleUtf8Error(f"Invalid UTF-8 string. Underlying error: {exc}") from exc

        return cls(role=data[1], producer=data[3], canonical_name=name)
