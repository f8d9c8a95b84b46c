"""basexx API package.

This package provides the Codec class and the helpers that adapt caller input
containers for it.
"""

from basexx.api.codec import CODECS, Codec, get_codec
from basexx.api.inputs import BytesLike, TextLike, to_bytes, to_text

__all__ = [
    # Codec
    "Codec",
    "CODECS",
    "get_codec",
    # Input adaptation
    "BytesLike",
    "TextLike",
    "to_bytes",
    "to_text",
]
