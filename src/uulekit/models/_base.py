"""Base model for UULE records.

Every record inherits from :class:`UuleRecord`, which provides:

* A frozen pydantic configuration so records behave as values.
* A prefix check shared by both token generations.
* :meth:`UuleRecord.try_decode`, the ``None``-returning wrapper around
  the raising :meth:`decode` of each subclass.
"""

from __future__ import annotations

import logging
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict

from uulekit.exceptions import UuleDecodeError, UuleInvalidPrefixError

_logger = logging.getLogger(__name__)


class UuleRecord(BaseModel):
    """Base for UULE record models."""

    PREFIX: ClassVar[str] = ""
    """Literal marker every token of this generation starts with."""

    VERSION: ClassVar[int] = 0

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    @classmethod
    def try_decode(cls, token: str) -> Self | None:
        """Decode *token*, returning ``None`` on any decode failure.

        Relies on the ``decode`` classmethod every subclass defines.
        """
        try:
            return cls.decode(token)  # type: ignore[attr-defined,no-any-return]
        except UuleDecodeError as exc:
            _logger.debug("UULEv%d decode failed: %s", cls.VERSION, exc)
            return None

    @classmethod
    def _strip_prefix(cls, token: str) -> str:
        """Return *token* without its version marker.

        Raises :class:`UuleInvalidPrefixError` carrying the original string
        when the marker is missing.
        """
        if not token.startswith(cls.PREFIX):
            raise UuleInvalidPrefixError(token, expected=cls.PREFIX)
        return token[len(cls.PREFIX) :]
