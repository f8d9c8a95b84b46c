"""Codec implementation for the basexx package.

This module provides the Codec class, which binds one encoding variant to the
bit-regrouping engine, and a registry of ready-made codecs for the built-in
RFC 4648 variants.
"""

from __future__ import annotations

import logging
from typing import Dict

from basexx.api.inputs import BytesLike, TextLike, to_bytes, to_text
from basexx.engine import check_format, pack, unpack
from basexx.exceptions import DecodeError
from basexx.interfaces.encoding import IEncoder
from basexx.variants import VARIANTS, Variant, get_variant

logger = logging.getLogger(__name__)


class Codec(IEncoder):
    """Symmetric encoder/decoder for one variant.

    Encoding is total over byte input. Decoding is all-or-nothing: text is
    validated for length and padding first, then symbols are resolved one by
    one and the first bad character aborts the call.

    Attributes:
        variant: The encoding configuration this codec applies.
    """

    def __init__(self, variant: Variant) -> None:
        """Initialize the codec.

        Args:
            variant: The encoding configuration to apply.
        """
        self.variant = variant

    @property
    def name(self) -> str:
        """Registry name of the variant this codec applies."""
        return self.variant.name

    def encode(self, data: BytesLike) -> str:
        """Encode data into text.

        Args:
            data: Bytes, a str (encoded as UTF-8) or an iterable of ints.

        Returns:
            The encoded text; empty input yields an empty string.

        Raises:
            InvalidEncodedTypeError: If data is not a supported container.

        Example:
            >>> Codec(get_variant("base64")).encode(b"hi")
            'aGk='
        """
        return pack(to_bytes(data, "encode"), self.variant)

    def decode(self, text: TextLike) -> bytes:
        """Decode text into bytes.

        Args:
            text: A str, ASCII bytes or an iterable of character codes.

        Returns:
            The decoded bytes; empty input yields empty bytes.

        Raises:
            InvalidLengthError: If the length is not a multiple of the group size.
            InvalidPaddingCountError: If the trailing padding is too long.
            InvalidCharacterError: If a symbol is outside the alphabet.
            InvalidEncodedTypeError: If text is not a supported container.
        """
        encoded = to_text(text, "decode")
        if not encoded:
            return b""

        try:
            padding = check_format(encoded, self.variant)
            return unpack(encoded, self.variant, padding)
        except DecodeError as error:
            logger.debug("%s decode failed with code %d: %s", self.name, error.code, error.detail)
            raise

    def __repr__(self) -> str:
        return f"Codec({self.name!r})"


CODECS: Dict[str, Codec] = {name: Codec(variant) for name, variant in VARIANTS.items()}


def get_codec(name: str) -> Codec:
    """Return the shared codec for a built-in variant.

    Args:
        name: One of "base64", "base64url", "base32", "base32hex", "base16".

    Returns:
        The codec for that variant.

    Raises:
        KeyError: If no variant has that name.
    """
    return CODECS[get_variant(name).name]
