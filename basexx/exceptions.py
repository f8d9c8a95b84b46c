"""Exception classes for basexx.

This module defines the result codes and custom exception types raised while
encoding and decoding. Every failure surfaces synchronously; nothing is
retried and no partial output is returned.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional


class ResultCode(IntEnum):
    """Numeric classification of codec failures."""

    SUCCESS = 0

    INVALID_BASE = 10
    INVALID_LENGTH = 11
    INVALID_CHARACTER = 12
    INVALID_ENCODED_TYPE = 13
    INVALID_PADDING_COUNT = 14


_DESCRIPTIONS = {
    ResultCode.INVALID_LENGTH: "Invalid encoded text length.",
    ResultCode.INVALID_PADDING_COUNT: "Invalid encoded padding count.",
    ResultCode.INVALID_CHARACTER: "Invalid encoded character.",
    ResultCode.INVALID_ENCODED_TYPE: "Invalid encoded type.",
}


def describe(code: ResultCode) -> str:
    """Return the default human readable description for a result code."""
    return _DESCRIPTIONS.get(code, "Invalid encoded text.")


class BaseXXError(Exception):
    """Base exception class for all basexx errors.

    Attributes:
        code: The result code classifying the failure.
        caller: Name of the operation that detected the failure.
        detail: The description part of the message.
    """

    code = ResultCode.INVALID_BASE

    def __init__(self, caller: str = "", message: Optional[str] = None) -> None:
        self.caller = caller
        self.detail = message or describe(self.code)
        if caller:
            super().__init__(f"Error occurred in {caller}: {self.detail}")
        else:
            super().__init__(self.detail)


class DecodeError(BaseXXError):
    """Exception raised when encoded text is malformed."""

    pass


class InvalidLengthError(DecodeError):
    """Exception raised when encoded text is not a whole number of symbol groups."""

    code = ResultCode.INVALID_LENGTH


class InvalidPaddingCountError(DecodeError):
    """Exception raised when the trailing padding run is too long or inconsistent."""

    code = ResultCode.INVALID_PADDING_COUNT


class InvalidCharacterError(DecodeError):
    """Exception raised when a symbol is not part of the active alphabet.

    Attributes:
        character: The offending character, when known.
        position: Index of the offending character in the input, when known.
    """

    code = ResultCode.INVALID_CHARACTER

    def __init__(
        self,
        caller: str = "",
        message: Optional[str] = None,
        character: Optional[str] = None,
        position: Optional[int] = None,
    ) -> None:
        self.character = character
        self.position = position
        if message is None and character is not None:
            message = f"{describe(self.code)[:-1]} {character!r}"
            if position is not None:
                message += f" at position {position}"
            message += "."
        super().__init__(caller, message)


class InvalidEncodedTypeError(BaseXXError, TypeError):
    """Exception raised when an input container cannot be adapted to bytes or text."""

    code = ResultCode.INVALID_ENCODED_TYPE


_ERRORS = {
    ResultCode.INVALID_LENGTH: InvalidLengthError,
    ResultCode.INVALID_CHARACTER: InvalidCharacterError,
    ResultCode.INVALID_ENCODED_TYPE: InvalidEncodedTypeError,
    ResultCode.INVALID_PADDING_COUNT: InvalidPaddingCountError,
}


def error_for(
    code: ResultCode, caller: str, message: Optional[str] = None, **details: Any
) -> BaseXXError:
    """Build the exception matching a result code.

    Args:
        code: The failure classification.
        caller: Name of the operation reporting the failure.
        message: Optional description overriding the default one.
        **details: Extra attributes for the exception, such as the character
            and position of an invalid symbol.

    Returns:
        An exception instance ready to be raised.

    Raises:
        ValueError: If code is ResultCode.SUCCESS.
    """
    if code == ResultCode.SUCCESS:
        raise ValueError("success is not an error")
    cls = _ERRORS.get(code, DecodeError)
    return cls(caller, message, **details)
