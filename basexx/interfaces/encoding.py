"""Alphabet and encoder interfaces for basexx.

This module defines protocols for symbol alphabets and for binary-to-text
encoders.
"""

from __future__ import annotations

from typing import Protocol


class IAlphabet(Protocol):
    """Interface for a bidirectional symbol table."""

    def symbol_of(self, value: int) -> str:
        """Return the character representing a symbol value.

        Args:
            value: A symbol value in 0..size-1.

        Returns:
            The single character for the value.
        """
        ...

    def value_of(self, character: str) -> int:
        """Return the symbol value represented by a character.

        Args:
            character: A single character.

        Returns:
            The symbol value.

        Raises:
            InvalidCharacterError: When the character is not in the alphabet.
        """
        ...


class IEncoder(Protocol):
    """Interface for binary-to-text encoding and decoding operations."""

    def encode(self, data: bytes) -> str:
        """Encode bytes into text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        ...

    def decode(self, text: str) -> bytes:
        """Decode text back into bytes.

        Args:
            text: The encoded text.

        Returns:
            The decoded bytes.

        Raises:
            DecodeError: When the text is malformed.
        """
        ...
