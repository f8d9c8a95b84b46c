"""Format validation for encoded text.

The validator checks the shape of encoded text before any symbol is decoded:
the length must be a whole, nonzero number of symbol groups and the trailing
padding run must fit the variant. Character membership is left to the
unpacker.
"""

from __future__ import annotations

from basexx.exceptions import ResultCode, error_for
from basexx.variants import PADDING, Variant


def count_padding(text: str, variant: Variant) -> int:
    """Count the contiguous run of padding characters at the end of text.

    Variants that never emit padding are still scanned for "=" so that a
    stray run is reported against their zero padding bound.
    """
    padding = variant.padding or PADDING
    count = 0
    index = len(text) - 1
    while index >= 0 and text[index] == padding:
        count += 1
        index -= 1
    return count


def check_format(text: str, variant: Variant) -> int:
    """Validate the length and padding of encoded text.

    Args:
        text: Candidate encoded text.
        variant: The variant the text claims to be encoded with.

    Returns:
        The number of trailing padding characters.

    Raises:
        InvalidLengthError: If the length is not a positive multiple of the
            symbol group size.
        InvalidPaddingCountError: If the padding run is longer than the variant
            allows, or leaves a final group no byte count could produce.
    """
    length = len(text)
    if length == 0 or length % variant.group_symbols != 0:
        raise error_for(ResultCode.INVALID_LENGTH, "check_format")

    padding = count_padding(text, variant)
    if padding > variant.max_padding:
        raise error_for(ResultCode.INVALID_PADDING_COUNT, "check_format")

    if padding and variant.bytes_for(variant.group_symbols - padding) is None:
        raise error_for(
            ResultCode.INVALID_PADDING_COUNT,
            "check_format",
            f"{padding} padding characters cannot end a {variant.name} group.",
        )

    return padding
