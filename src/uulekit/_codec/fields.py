"""Line and integer parsing for the UULEv2 text record.

Python's :func:`int` accepts whitespace, underscores and non-ASCII digits,
and :meth:`str.splitlines` breaks on form feeds and Unicode separators.
The helpers here only accept what the wire format allows.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from uulekit.exceptions import UuleInvalidIntegerError

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def iter_lines(text: str) -> Iterator[str]:
    """Yield lines split on ``\\n``, dropping one trailing ``\\r`` per line.

    A terminating newline does not produce a final empty line.
    """
    if not text:
        return
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def parse_bounded_int(value: str, *, field: str, minimum: int, maximum: int) -> int:
    """Parse *value* as a base-10 integer in ``[minimum, maximum]``.

    A leading ``-`` is only accepted when *minimum* is negative.

    Raises
    ------
    UuleInvalidIntegerError
        If *value* is not a plain integer or falls outside the range.
    """
    pattern = _SIGNED_RE if minimum < 0 else _UNSIGNED_RE
    if not pattern.fullmatch(value):
        raise UuleInvalidIntegerError(
            f"Invalid integer value for {field}: {value!r}",
            field=field,
            value=value,
        )
    number = int(value)
    if not minimum <= number <= maximum:
        raise UuleInvalidIntegerError(
            f"Integer value for {field} out of range [{minimum}, {maximum}]: {value}",
            field=field,
            value=value,
        )
    return number
