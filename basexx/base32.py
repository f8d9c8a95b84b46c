"""Base32 helpers (RFC 4648 sections 6 and 7)."""

from __future__ import annotations

from basexx.api.codec import get_codec
from basexx.api.inputs import BytesLike, TextLike

_STANDARD = get_codec("base32")
_HEX = get_codec("base32hex")


def encode(data: BytesLike) -> str:
    """Encode data with the standard Base32 alphabet."""
    return _STANDARD.encode(data)


def encode_hex(data: BytesLike) -> str:
    """Encode data with the extended hex Base32 alphabet."""
    return _HEX.encode(data)


def decode(text: TextLike) -> bytes:
    """Decode standard Base32 text. Only uppercase symbols are accepted."""
    return _STANDARD.decode(text)


def decode_hex(text: TextLike) -> bytes:
    """Decode extended hex Base32 text. Only uppercase symbols are accepted."""
    return _HEX.decode(text)
