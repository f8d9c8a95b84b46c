"""Tests for the bit-regrouping engine.

This module tests the engine below the public helpers:
- Window slicing and joining
- Significant symbol tables and padding bounds per variant
- Format validation order
- Round trips and length laws against the standard library
"""

from __future__ import annotations

import base64 as stdlib_base64

import pytest

from basexx.engine import (
    check_format,
    count_padding,
    join_windows,
    pack,
    resolve_symbols,
    split_windows,
    unpack,
)
from basexx.exceptions import (
    InvalidCharacterError,
    InvalidLengthError,
    InvalidPaddingCountError,
)
from basexx.variants import (
    BASE16_STANDARD,
    BASE32_EXTENDED_HEX,
    BASE32_STANDARD,
    BASE64_STANDARD,
    BASE64_URL,
    VARIANTS,
    Variant,
)

from implementation import get_entropy

ORACLES = {
    "base64": stdlib_base64.b64encode,
    "base64url": stdlib_base64.urlsafe_b64encode,
    "base32": stdlib_base64.b32encode,
    "base32hex": stdlib_base64.b32hexencode,
    "base16": stdlib_base64.b16encode,
}


@pytest.fixture(params=sorted(VARIANTS))
def variant(request: pytest.FixtureRequest) -> Variant:
    """Provide each built-in variant in turn."""
    return VARIANTS[request.param]


def test_split_and_join_windows() -> None:
    """Test MSB-first slicing and its inverse."""
    assert split_windows(0x5C6E5C, 6, 4) == [23, 6, 57, 28]
    assert join_windows([23, 6, 57, 28], 6, 4) == 0x5C6E5C
    assert split_windows(0xFF, 4, 2) == [15, 15]
    assert join_windows([11, 16], 5, 8) == (11 << 35) | (16 << 30)


def test_significant_tables() -> None:
    """Test the per-variant significant symbol counts and padding bounds."""
    assert BASE64_STANDARD.significant[1:] == (2, 3)
    assert BASE64_URL.significant[1:] == (2, 3)
    assert BASE32_STANDARD.significant[1:] == (2, 4, 5, 7)
    assert BASE32_EXTENDED_HEX.significant[1:] == (2, 4, 5, 7)
    assert BASE16_STANDARD.significant[1:] == ()

    assert BASE64_STANDARD.max_padding == 2
    assert BASE32_STANDARD.max_padding == 6
    assert BASE16_STANDARD.max_padding == 0


def test_bytes_for_inverts_significant() -> None:
    """Test that a short group's symbol count maps back to its byte count."""
    assert [BASE64_STANDARD.bytes_for(n) for n in range(5)] == [None, None, 1, 2, None]
    assert [BASE32_STANDARD.bytes_for(n) for n in range(9)] == [
        None, None, 1, None, 2, 3, None, 4, None,
    ]
    assert BASE16_STANDARD.bytes_for(1) is None


def test_count_padding() -> None:
    """Test that only the contiguous trailing run is counted."""
    assert count_padding("XA==", BASE64_STANDARD) == 2
    assert count_padding("X=A=", BASE64_STANDARD) == 1
    assert count_padding("====", BASE64_STANDARD) == 4
    assert count_padding("5=", BASE16_STANDARD) == 1
    assert count_padding("5C", BASE16_STANDARD) == 0


def test_check_format_order() -> None:
    """Test that length is checked before padding."""
    with pytest.raises(InvalidLengthError):
        check_format("=====", BASE64_STANDARD)

    with pytest.raises(InvalidLengthError):
        check_format("", BASE64_STANDARD)

    with pytest.raises(InvalidPaddingCountError):
        check_format("====", BASE64_STANDARD)

    assert check_format("$$$$", BASE64_STANDARD) == 0
    assert check_format("LQ======", BASE32_STANDARD) == 6

    with pytest.raises(InvalidPaddingCountError) as exc_info:
        check_format("5C==", BASE16_STANDARD)

    assert exc_info.value.caller == "check_format"


def test_pack_partial_groups(variant: Variant) -> None:
    """Test output shape for every final group size."""
    for k in range(1, variant.group_bytes):
        encoded = pack(bytes(k), variant)
        significant = variant.significant[k]
        assert len(encoded) == variant.group_symbols
        assert encoded[:significant] == variant.alphabet.symbol_of(0) * significant
        assert encoded[significant:] == variant.padding * (variant.group_symbols - significant)


def test_unpack_short_group() -> None:
    """Test unpacking without padding and an impossible short group."""
    assert unpack("XA", BASE64_STANDARD) == b"\\"
    assert unpack("XA==", BASE64_STANDARD, 2) == b"\\"

    with pytest.raises(InvalidPaddingCountError):
        unpack("X", BASE64_STANDARD)


def test_resolve_symbols_reports_position() -> None:
    """Test that the first bad character and its index are reported."""
    assert resolve_symbols("AV09", BASE32_EXTENDED_HEX) == [10, 31, 0, 9]

    with pytest.raises(InvalidCharacterError) as exc_info:
        resolve_symbols("ABC!D?", BASE64_STANDARD)

    assert exc_info.value.character == "!"
    assert exc_info.value.position == 3
    assert "position 3" in str(exc_info.value)


def test_matches_standard_library(variant: Variant) -> None:
    """Test encoded output against the standard library for random input."""
    oracle = ORACLES[variant.name]
    for length in range(0, 48):
        data = get_entropy(length)
        encoded = pack(data, variant)
        assert encoded == oracle(data).decode("ascii")
        padding = check_format(encoded, variant) if encoded else 0
        assert unpack(encoded, variant, padding) == data


def test_length_law(variant: Variant) -> None:
    """Test the encoded length for every input length up to three groups."""
    for length in range(0, 3 * variant.group_bytes + 1):
        expected = -(-length // variant.group_bytes) * variant.group_symbols
        assert len(pack(bytes(length), variant)) == expected
        assert variant.encoded_length(length) == expected


def test_reencoding_is_not_idempotent() -> None:
    """Test that encoding encoded text produces different text."""
    once = pack(b"foobar", BASE64_STANDARD)
    twice = pack(once.encode("ascii"), BASE64_STANDARD)
    assert once != twice
    padding = check_format(twice, BASE64_STANDARD)
    assert unpack(twice, BASE64_STANDARD, padding).decode("ascii") == once
