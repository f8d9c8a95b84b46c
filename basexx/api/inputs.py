"""Input adaptation for the public codec surface.

Callers hand data over in several container types. This module normalizes
them to bytes for encoding and to text for decoding so the engine only ever
sees one representation.
"""

from __future__ import annotations

from typing import Any, Iterable, Union

from basexx.exceptions import ResultCode, error_for

BytesLike = Union[bytes, bytearray, memoryview, str, Iterable[int]]
TextLike = Union[str, bytes, bytearray, memoryview, Iterable[int]]


def _from_ints(data: Any, caller: str) -> bytes:
    code = ResultCode.INVALID_ENCODED_TYPE
    if isinstance(data, (int, float)) or not hasattr(data, "__iter__"):
        raise error_for(code, caller, f"Unsupported input type {type(data).__name__}.")
    try:
        return bytes(data)
    except ValueError:
        raise error_for(code, caller, "Byte values must be in range 0..255.") from None
    except TypeError:
        raise error_for(code, caller, "Byte sequences must contain only integers.") from None


def to_bytes(data: BytesLike, caller: str = "encode") -> bytes:
    """Normalize encoder input to bytes.

    Strings are encoded as UTF-8; iterables must yield integers in 0..255.

    Args:
        data: The value to encode.
        caller: Operation name used in error messages.

    Returns:
        The input as bytes.

    Raises:
        InvalidEncodedTypeError: If the value cannot be viewed as bytes.
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode("utf-8")
    return _from_ints(data, caller)


def to_text(text: TextLike, caller: str = "decode") -> str:
    """Normalize decoder input to text.

    Byte containers map one byte to one character, so a byte outside the
    alphabet surfaces later as an invalid character rather than a type error.

    Args:
        text: The encoded value.
        caller: Operation name used in error messages.

    Returns:
        The input as a str.

    Raises:
        InvalidEncodedTypeError: If the value cannot be viewed as text.
    """
    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text).decode("latin-1")
    return _from_ints(text, caller).decode("latin-1")
