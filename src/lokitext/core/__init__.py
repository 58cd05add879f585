"""Public surface for lokitext.core: error types, result records and protocols."""

from lokitext.core.errors import (
    DecodeError,
    IncompleteEscapeError,
    InvalidBinaryError,
    InvalidCharacterError,
    InvalidHexError,
    InvalidLengthError,
    InvalidUtf8Error,
    OddLengthError,
)
from lokitext.core.models import PatternMatch

__all__ = [
    "DecodeError",
    "IncompleteEscapeError",
    "InvalidBinaryError",
    "InvalidCharacterError",
    "InvalidHexError",
    "InvalidLengthError",
    "InvalidUtf8Error",
    "OddLengthError",
    "PatternMatch",
]
