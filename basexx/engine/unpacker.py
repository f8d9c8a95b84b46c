"""Bit unpacker: symbols back to bytes.

The unpacker expects text that already passed format validation. It resolves
each symbol through the alphabet inverse, joins a group's windows into one
integer and cuts it back into bytes. A short final group yields only the
bytes its symbols fully determine.
"""

from __future__ import annotations

from typing import List

from basexx.exceptions import InvalidCharacterError, ResultCode, error_for
from basexx.variants import Variant


def resolve_symbols(text: str, variant: Variant) -> List[int]:
    """Map every character of text to its symbol value.

    Args:
        text: Symbol characters with padding already removed.
        variant: Encoding configuration.

    Returns:
        The symbol values in order.

    Raises:
        InvalidCharacterError: On the first character outside the alphabet.
    """
    value_of = variant.alphabet.value_of
    values: List[int] = []
    for position, character in enumerate(text):
        try:
            values.append(value_of(character))
        except InvalidCharacterError:
            raise error_for(
                ResultCode.INVALID_CHARACTER, "unpack", character=character, position=position
            ) from None
    return values


def join_windows(values: List[int], bits: int, count: int) -> int:
    """Concatenate up to count windows MSB first, zero-filling missing ones.

    >>> hex(join_windows([23, 6, 57, 28], 6, 4))
    '0x5c6e5c'
    """
    value = 0
    for window in values:
        value = (value << bits) | window
    return value << (bits * (count - len(values)))


def unpack(text: str, variant: Variant, padding: int = 0) -> bytes:
    """Decode validated symbol text into bytes.

    Args:
        text: Encoded text that passed check_format.
        variant: Encoding configuration.
        padding: Number of trailing padding characters to strip.

    Returns:
        The decoded bytes.

    Raises:
        InvalidCharacterError: If a symbol is outside the alphabet.
        InvalidPaddingCountError: If the final group has a symbol count no
            byte count produces.
    """
    bits = variant.bits
    group_bytes = variant.group_bytes
    group_symbols = variant.group_symbols

    values = resolve_symbols(text[: len(text) - padding], variant)

    decoded = bytearray()
    for start in range(0, len(values), group_symbols):
        group = values[start : start + group_symbols]
        chunk = join_windows(group, bits, group_symbols).to_bytes(group_bytes, "big")
        if len(group) == group_symbols:
            decoded += chunk
            continue

        byte_count = variant.bytes_for(len(group))
        if byte_count is None:
            raise error_for(ResultCode.INVALID_PADDING_COUNT, "unpack")
        decoded += chunk[:byte_count]

    return bytes(decoded)
