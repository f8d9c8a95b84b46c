"""Base64 helpers (RFC 4648 sections 4 and 5).

Standard and URL-safe Base64 share group sizes and differ only in the
characters for values 62 and 63.
"""

from __future__ import annotations

from basexx.api.codec import get_codec
from basexx.api.inputs import BytesLike, TextLike

_STANDARD = get_codec("base64")
_URLSAFE = get_codec("base64url")


def encode(data: BytesLike) -> str:
    """Encode data with the standard Base64 alphabet."""
    return _STANDARD.encode(data)


def encode_urlsafe(data: BytesLike) -> str:
    """Encode data with the URL and filename safe Base64 alphabet."""
    return _URLSAFE.encode(data)


def decode(text: TextLike) -> bytes:
    """Decode standard Base64 text."""
    return _STANDARD.decode(text)


def decode_urlsafe(text: TextLike) -> bytes:
    """Decode URL and filename safe Base64 text."""
    return _URLSAFE.decode(text)
