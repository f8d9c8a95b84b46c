"""Bit-regrouping engine.

This package provides the format validator, the bit packer used for encoding
and the bit unpacker used for decoding.
"""

from basexx.engine.packer import pack, split_windows
from basexx.engine.unpacker import join_windows, resolve_symbols, unpack
from basexx.engine.validator import check_format, count_padding

__all__ = [
    # Encoding
    "pack",
    "split_windows",
    # Decoding
    "unpack",
    "join_windows",
    "resolve_symbols",
    # Validation
    "check_format",
    "count_padding",
]
