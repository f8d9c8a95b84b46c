"""RFC 4648 alphabet tables.

This module provides the Alphabet class and the five alphabets defined by
RFC 4648 sections 4 through 8. The tables are built once at import and are
read-only afterwards.
"""

from __future__ import annotations

from typing import Dict

from basexx.exceptions import ResultCode, error_for
from basexx.interfaces.encoding import IAlphabet


class Alphabet(IAlphabet):
    """Bidirectional mapping between symbol values and printable characters.

    Attributes:
        characters: The characters ordered by the value they represent.
        size: Number of symbols in the alphabet.
    """

    def __init__(self, characters: str) -> None:
        """Build an alphabet and its inverse lookup.

        Args:
            characters: The characters ordered by symbol value.

        Raises:
            ValueError: If the size is not a power of two or a character repeats.
        """
        size = len(characters)
        if size < 2 or size & (size - 1):
            raise ValueError(f"alphabet size must be a power of two, got {size}")

        inverse: Dict[str, int] = {}
        for value, character in enumerate(characters):
            if character in inverse:
                raise ValueError(f"duplicate alphabet character {character!r}")
            inverse[character] = value

        self.characters = characters
        self.size = size
        self._inverse = inverse

    def symbol_of(self, value: int) -> str:
        """Return the character for a symbol value.

        Args:
            value: A symbol value in 0..size-1.

        Returns:
            The character representing the value.

        Raises:
            IndexError: If the value is out of range.
        """
        if not 0 <= value < self.size:
            raise IndexError(f"symbol value {value} out of range 0..{self.size - 1}")
        return self.characters[value]

    def value_of(self, character: str) -> int:
        """Return the symbol value for a character.

        Args:
            character: A single character.

        Returns:
            The value the character represents.

        Raises:
            InvalidCharacterError: If the character is not in the alphabet.
        """
        try:
            return self._inverse[character]
        except KeyError:
            raise error_for(ResultCode.INVALID_CHARACTER, "value_of", character=character) from None

    def __contains__(self, character: object) -> bool:
        return character in self._inverse

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"Alphabet({self.characters!r})"


# https://datatracker.ietf.org/doc/html/rfc4648#section-4
BASE64 = Alphabet("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/")

# https://datatracker.ietf.org/doc/html/rfc4648#section-5
BASE64_URLSAFE = Alphabet("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_")

# https://datatracker.ietf.org/doc/html/rfc4648#section-6
BASE32 = Alphabet("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567")

# https://datatracker.ietf.org/doc/html/rfc4648#section-7
BASE32_HEX = Alphabet("0123456789ABCDEFGHIJKLMNOPQRSTUV")

# https://datatracker.ietf.org/doc/html/rfc4648#section-8
BASE16 = Alphabet("0123456789ABCDEF")
