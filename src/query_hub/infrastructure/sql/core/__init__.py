"""Core SQL utilities package."""

from .identifier import escape_identifier, is_numeric
from .parameters import PLACEHOLDER, ParameterAccumulator

__all__ = [
    "escape_identifier",
    "is_numeric",
    "PLACEHOLDER",
    "ParameterAccumulator",
]
