from __future__ import annotations

import pytest

from uulekit._codec import iter_lines, parse_bounded_int, urlsafe_b64decode, urlsafe_b64encode
from uulekit.exceptions import UuleBase64Error, UuleInvalidIntegerError


def test_urlsafe_b64encode_strips_padding_and_uses_url_alphabet() -> None:
    assert urlsafe_b64encode(b"\xfb\xff") == "-_8"


def test_urlsafe_b64decode_accepts_padded_and_unpadded_input() -> None:
    assert urlsafe_b64decode("-_8") == b"\xfb\xff"
    assert urlsafe_b64decode("-_8=") == b"\xfb\xff"
    assert urlsafe_b64decode("") == b""


@pytest.mark.parametrize("text", ["abcd ", "+/8", "ab\ncd", "ab=c", "é"])
def test_urlsafe_b64decode_rejects_characters_outside_alphabet(text: str) -> None:
    with pytest.raises(UuleBase64Error, match="Invalid character"):
        urlsafe_b64decode(text)


def test_urlsafe_b64decode_rejects_impossible_length() -> None:
    with pytest.raises(UuleBase64Error) as excinfo:
        urlsafe_b64decode("abcde")
    assert excinfo.value.__cause__ is not None


def test_iter_lines_matches_wire_line_rules() -> None:
    assert list(iter_lines("a\nb\r\nc")) == ["a", "b", "c"]
    assert list(iter_lines("a\n")) == ["a"]
    assert list(iter_lines("a\n\nb")) == ["a", "", "b"]
    assert list(iter_lines("a\x0cb")) == ["a\x0cb"]
    assert list(iter_lines("")) == []


def test_parse_bounded_int_accepts_signs_within_range() -> None:
    assert parse_bounded_int("-5", field="f", minimum=-10, maximum=10) == -5
    assert parse_bounded_int("+7", field="f", minimum=0, maximum=10) == 7
    assert parse_bounded_int(str(2**128 - 1), field="f", minimum=0, maximum=2**128 - 1) == 2**128 - 1


@pytest.mark.parametrize("value", ["", " 1", "1_0", "1.0", "０", "-1", "256", "0x10"])
def test_parse_bounded_int_rejects_non_wire_integers(value: str) -> None:
    with pytest.raises(UuleInvalidIntegerError) as excinfo:
        parse_bounded_int(value, field="role", minimum=0, maximum=255)
    assert excinfo.value.field == "role"
    assert excinfo.value.value == value


@pytest.mark.parametrize("text", ["CAJ", "CAL=", "-_9"])
def test_urlsafe_b64decode_rejects_non_zero_trailing_bits(text: str) -> None:
    with pytest.raises(UuleBase64Error, match="trailing bits"):
        urlsafe_b64decode(text)
