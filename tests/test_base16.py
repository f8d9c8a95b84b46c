"""Tests for Base16 encoding and decoding."""

from __future__ import annotations

import pytest

from basexx import base16
from basexx.exceptions import (
    InvalidCharacterError,
    InvalidLengthError,
    InvalidPaddingCountError,
)

from implementation import get_entropy

TEXT_VECTORS = [
    ("", ""),
    ("\\", "5C"),
    ("\\n", "5C6E"),
    ("\\n\\0", "5C6E5C30"),
    (" ", "20"),
    ("`", "60"),
    ("한글", "ED959CEAB880"),
    ("漢字", "E6BCA2E5AD97"),
    ("汉字", "E6B189E5AD97"),
    ("ひらがな", "E381B2E38289E3818CE381AA"),
    ("カタカナ", "E382ABE382BFE382ABE3838A"),
]


@pytest.mark.parametrize("text,expected", TEXT_VECTORS)
def test_encode_decode_text(text: str, expected: str) -> None:
    """Test the known-answer vectors in both directions."""
    assert base16.encode(text) == expected
    assert base16.decode(expected) == text.encode("utf-8")


def test_encode_containers() -> None:
    """Test that lists and bytearrays encode like bytes."""
    assert base16.encode([0xED, 0x95, 0x9C]) == "ED959C"
    assert base16.encode([ord(" ")]) == "20"
    assert base16.encode(bytearray(b"aA")) == "6141"
    assert base16.encode([]) == ""


def test_never_padded() -> None:
    """Test that output is always exactly two symbols per byte."""
    for length in range(0, 9):
        encoded = base16.encode(get_entropy(length))
        assert len(encoded) == 2 * length
        assert "=" not in encoded


def test_symmetry() -> None:
    """Test that every single byte value survives a round trip."""
    data = bytes(range(256))
    assert base16.decode(base16.encode(data)) == data


def test_decode_odd_length() -> None:
    """Test that an odd number of symbols is rejected."""
    with pytest.raises(InvalidLengthError):
        base16.decode("F")

    with pytest.raises(InvalidLengthError):
        base16.decode("5C=")


@pytest.mark.parametrize("text", ["5=", "==", "5C==", "5C6E=="])
def test_decode_padding_not_allowed(text: str) -> None:
    """Test that any trailing padding run exceeds the Base16 bound of zero."""
    with pytest.raises(InvalidPaddingCountError) as exc_info:
        base16.decode(text)

    assert "Invalid encoded padding count" in str(exc_info.value)


@pytest.mark.parametrize("text", ["GG", "5c", "=5", "5=5C", "0x"])
def test_decode_invalid_character(text: str) -> None:
    """Test that lowercase, foreign symbols and inner padding are rejected."""
    with pytest.raises(InvalidCharacterError):
        base16.decode(text)
