"""basexx: RFC 4648 binary-to-text encodings.

This package implements Base64 (standard and URL-safe), Base32 (standard and
extended hex) and Base16 on top of a single bit-regrouping engine.

Main Components:
    - base64, base32, base16: Per-variant encode/decode helpers
    - Codec: Encoder/decoder bound to one Variant
    - Variant: Group sizes, symbol width and alphabet of an encoding
    - Alphabet: Bidirectional symbol tables
    - Exceptions: Decode failure taxonomy

Example:
    >>> from basexx import base64, base32
    >>> base64.encode(b"\\\\")
    'XA=='
    >>> base32.decode("LQ======")
    b'\\\\'
"""

import logging

from basexx import base16, base32, base64
from basexx.alphabets import BASE16, BASE32, BASE32_HEX, BASE64, BASE64_URLSAFE, Alphabet
from basexx.api import CODECS, Codec, get_codec
from basexx.exceptions import (
    BaseXXError,
    DecodeError,
    InvalidCharacterError,
    InvalidEncodedTypeError,
    InvalidLengthError,
    InvalidPaddingCountError,
    ResultCode,
)
from basexx.variants import (
    BASE16_STANDARD,
    BASE32_EXTENDED_HEX,
    BASE32_STANDARD,
    BASE64_STANDARD,
    BASE64_URL,
    VARIANTS,
    Variant,
    get_variant,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Helpers
    "base64",
    "base32",
    "base16",
    # Codec
    "Codec",
    "CODECS",
    "get_codec",
    # Variants
    "Variant",
    "VARIANTS",
    "get_variant",
    "BASE64_STANDARD",
    "BASE64_URL",
    "BASE32_STANDARD",
    "BASE32_EXTENDED_HEX",
    "BASE16_STANDARD",
    # Alphabets
    "Alphabet",
    "BASE64",
    "BASE64_URLSAFE",
    "BASE32",
    "BASE32_HEX",
    "BASE16",
    # Exceptions
    "ResultCode",
    "BaseXXError",
    "DecodeError",
    "InvalidLengthError",
    "InvalidPaddingCountError",
    "InvalidCharacterError",
    "InvalidEncodedTypeError",
]
