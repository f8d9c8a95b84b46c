"""Base16 helpers (RFC 4648 section 8)."""

from __future__ import annotations

from basexx.api.codec import get_codec
from basexx.api.inputs import BytesLike, TextLike

_CODEC = get_codec("base16")


def encode(data: BytesLike) -> str:
    return _CODEC.encode(data)


def decode(text: TextLike) -> bytes:
    return _CODEC.decode(text)
