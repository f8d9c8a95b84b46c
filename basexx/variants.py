"""Encoding variant configuration.

A Variant bundles everything the bit-regrouping engine needs to know about one
RFC 4648 encoding: the symbol width, the byte and symbol group sizes, the
alphabet and the padding character. The partial-group tables are derived from
those values once, when the variant is created.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from basexx.alphabets import BASE16, BASE32, BASE32_HEX, BASE64, BASE64_URLSAFE, Alphabet

PADDING = "="


@dataclass(frozen=True)
class Variant:
    """Configuration for one encoding variant.

    Attributes:
        name: Registry name of the variant.
        bits: Symbol width W in bits.
        group_bytes: Bytes per full input group (G_in).
        group_symbols: Symbols per full output group (G_out).
        alphabet: Symbol table of 2**bits characters.
        padding: Padding character, or None when groups are always full.
        significant: Significant symbol count s(k) indexed by the number of
            bytes k in the final group, for k in 0..group_bytes-1.
        max_padding: Longest allowed trailing padding run.
    """

    name: str
    bits: int
    group_bytes: int
    group_symbols: int
    alphabet: Alphabet
    padding: Optional[str] = PADDING
    significant: Tuple[int, ...] = field(init=False)
    max_padding: int = field(init=False)

    def __post_init__(self) -> None:
        if 8 * self.group_bytes != self.bits * self.group_symbols:
            raise ValueError(
                f"{self.name}: {self.group_bytes} bytes do not split into "
                f"{self.group_symbols} symbols of {self.bits} bits"
            )
        if len(self.alphabet) != 1 << self.bits:
            raise ValueError(
                f"{self.name}: alphabet has {len(self.alphabet)} symbols, expected {1 << self.bits}"
            )
        if self.padding is not None and self.padding in self.alphabet:
            raise ValueError(f"{self.name}: padding {self.padding!r} is an alphabet symbol")

        # s(k) = ceil(8k / W); a trailing window is kept if it holds any real bit
        significant = tuple(-(-8 * k // self.bits) for k in range(self.group_bytes))
        if len(significant) > 1 and self.padding is None:
            raise ValueError(f"{self.name}: partial groups require a padding character")
        max_padding = self.group_symbols - min(significant[1:]) if len(significant) > 1 else 0

        object.__setattr__(self, "significant", significant)
        object.__setattr__(self, "max_padding", max_padding)

    def bytes_for(self, symbol_count: int) -> Optional[int]:
        """Return how many bytes a final group of symbol_count symbols carries.

        Args:
            symbol_count: Number of significant symbols in a short final group.

        Returns:
            The byte count k with s(k) == symbol_count, or None if no partial
            group produces that many symbols.
        """
        if symbol_count <= 0 or symbol_count >= self.group_symbols:
            return None
        try:
            return self.significant.index(symbol_count)
        except ValueError:
            return None

    def encoded_length(self, byte_count: int) -> int:
        """Return the encoded length for byte_count input bytes."""
        return -(-byte_count // self.group_bytes) * self.group_symbols


BASE64_STANDARD = Variant("base64", bits=6, group_bytes=3, group_symbols=4, alphabet=BASE64)
BASE64_URL = Variant("base64url", bits=6, group_bytes=3, group_symbols=4, alphabet=BASE64_URLSAFE)
BASE32_STANDARD = Variant("base32", bits=5, group_bytes=5, group_symbols=8, alphabet=BASE32)
BASE32_EXTENDED_HEX = Variant("base32hex", bits=5, group_bytes=5, group_symbols=8, alphabet=BASE32_HEX)
BASE16_STANDARD = Variant("base16", bits=4, group_bytes=1, group_symbols=2, alphabet=BASE16, padding=None)

VARIANTS: Dict[str, Variant] = {
    variant.name: variant
    for variant in (
        BASE64_STANDARD,
        BASE64_URL,
        BASE32_STANDARD,
        BASE32_EXTENDED_HEX,
        BASE16_STANDARD,
    )
}


def get_variant(name: str) -> Variant:
    """Look up a built-in variant by name.

    Args:
        name: One of "base64", "base64url", "base32", "base32hex", "base16".

    Returns:
        The matching Variant.

    Raises:
        KeyError: If no variant has that name.
    """
    try:
        return VARIANTS[name.lower()]
    except KeyError:
        raise KeyError(f"unknown variant {name!r}, expected one of {sorted(VARIANTS)}") from None
