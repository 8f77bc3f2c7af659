"""Custom exception hierarchy for uulekit."""

from __future__ import annotations


class UuleError(Exception):
    """Base exception for all uulekit errors."""


class UuleConfigError(UuleError):
    """Invalid configuration value."""


class UuleEncodeError(UuleError):
    """A record cannot be turned into a token."""


class UuleNameTooLongError(UuleEncodeError):
    """UULEv1 canonical name does not fit the single length byte."""

    def __init__(self, message: str, *, length: int) -> None:
        self.length = length
        super().__init__(message)


class UuleDecodeError(UuleError):
    """Base for every failure while decoding a token."""


class UuleInvalidPrefixError(UuleDecodeError):
    """Token does not start with the version marker (``w+`` or ``a+``).

    The rejected input is kept verbatim in :attr:`token`.
    """

    def __init__(self, token: str, *, expected: str = "") -> None:
        self.token = token
        self.expected = expected
        if expected:
            message = f"Invalid prefix. Expected token starting with {expected!r}, received: {token}"
        else:
            message = f"Invalid prefix. Received: {token}"
        super().__init__(message)


class UuleBase64Error(UuleDecodeError):
    """Token payload is not valid base64-URL.

    The underlying :class:`binascii.Error` is available as ``__cause__``.
    """


class UuleUtf8Error(UuleDecodeError):
    """Decoded bytes are not valid UTF-8."""


class UuleMalformedRecordError(UuleDecodeError):
    """Decoded UULEv1 bytes are shorter than the header or the declared name."""

    def __init__(self, message: str, *, length: int, required: int) -> None:
        self.length = length
        self.required = required
        super().__init__(message)


class UuleUnexpectedEndError(UuleDecodeError):
    """UULEv2 text ended before *field* was read."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Unexpected end of string, expected line {field}")


class UuleUnexpectedLineError(UuleDecodeError):
    """UULEv2 line does not carry the expected field or delimiter."""

    def __init__(self, *, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Unexpected line: {actual} - expected: {expected}")


class UuleMissingValueError(UuleDecodeError):
    """UULEv2 field line has no value after its colon."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing value for field {field}")


class UuleInvalidIntegerError(UuleDecodeError):
    """Field value is not an integer, or is outside the field's range."""

    def __init__(self, message: str, *, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(message)


class UuleInvalidFloatError(UuleError, ValueError):
    """User-supplied degree value is not a finite decimal number."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid float value: {value!r}")
