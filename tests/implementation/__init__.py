"""Test support implementations.

This package provides helpers shared by the test modules.
"""

from .entropy import get_entropy

__all__ = [
    "get_entropy",
]
