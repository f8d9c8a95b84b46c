"""Bit packer: bytes to symbols.

Input bytes are taken a group at a time, joined into one big-endian integer
and re-sliced into fixed-width windows, most significant bits first. A short
final group is zero-extended; only the windows that contain real bits are
emitted, followed by padding up to a full symbol group.
"""

from __future__ import annotations

from typing import List

from basexx.variants import Variant


def split_windows(value: int, bits: int, count: int) -> List[int]:
    """Slice an integer into count windows of bits each, MSB first.

    >>> split_windows(0x5C6E5C, 6, 4)
    [23, 6, 57, 28]
    """
    mask = (1 << bits) - 1
    return [(value >> (bits * (count - 1 - i))) & mask for i in range(count)]


def pack(data: bytes, variant: Variant) -> str:
    """Encode bytes into symbol text for a variant.

    Args:
        data: The bytes to encode.
        variant: Encoding configuration.

    Returns:
        Encoded text of length variant.encoded_length(len(data)).
    """
    if not data:
        return ""

    bits = variant.bits
    group_bytes = variant.group_bytes
    group_symbols = variant.group_symbols
    symbol_of = variant.alphabet.symbol_of

    remainder = len(data) % group_bytes
    full = len(data) - remainder

    encoded: List[str] = []
    for start in range(0, full, group_bytes):
        value = int.from_bytes(data[start : start + group_bytes], "big")
        encoded.extend(symbol_of(window) for window in split_windows(value, bits, group_symbols))

    if remainder:
        tail = bytes(data[full:]) + bytes(group_bytes - remainder)
        value = int.from_bytes(tail, "big")
        significant = variant.significant[remainder]
        windows = split_windows(value, bits, group_symbols)[:significant]
        encoded.extend(symbol_of(window) for window in windows)
        encoded.append(variant.padding * (group_symbols - significant))

    return "".join(encoded)
