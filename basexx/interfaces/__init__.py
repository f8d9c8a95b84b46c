"""basexx interfaces package.

This package provides protocol definitions for alphabets and encoders.
"""

from .encoding import IAlphabet, IEncoder

__all__ = [
    "IAlphabet",
    "IEncoder",
]
