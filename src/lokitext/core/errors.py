"""Decoder error taxonomy.

Every decoder raises on the first problem it finds. All errors derive from
`DecodeError`, itself a `ValueError`, so callers can catch broadly or match
on the precise failure and read its structured attributes.
"""
from __future__ import annotations


class DecodeError(ValueError):
    """Base class for all codec decoding failures."""


class InvalidCharacterError(DecodeError):
    """A character outside the codec alphabet was found."""

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"invalid character {char!r} at position {position}")
        self.char = char
        self.position = position


class IncompleteEscapeError(DecodeError):
    """A percent-escape is missing one or both hex digits."""

    def __init__(self, position: int) -> None:
        super().__init__(f"incomplete escape sequence at position {position}")
        self.position = position


class InvalidHexError(DecodeError):
    """A non-hex character appeared where a hex digit was required."""

    def __init__(self, position: int) -> None:
        super().__init__(f"invalid hex character at position {position}")
        self.position = position


class InvalidLengthError(DecodeError):
    """Encoded input length is not a multiple of the codec group size."""

    def __init__(self, length: int, multiple: int) -> None:
        super().__init__(f"invalid length {length}: expected a multiple of {multiple}")
        self.length = length
        self.multiple = multiple


class OddLengthError(InvalidLengthError):
    """Hex input with an odd number of digits."""

    def __init__(self, length: int) -> None:
        super().__init__(length, 2)


class InvalidBinaryError(DecodeError):
    """An 8-character group contains something other than '0' or '1'."""

    def __init__(self, position: int) -> None:
        super().__init__(f"invalid binary group at position {position}")
        self.position = position


class InvalidUtf8Error(DecodeError):
    """Decoded bytes do not form valid UTF-8."""

    def __init__(self, reason: str = "") -> None:
        msg = "decoded bytes are not valid UTF-8"
        super().__init__(f"{msg}: {reason}" if reason else msg)
        self.reason = reason


def utf8_or_raise(data: bytes) -> str:
    """Decode *data* strictly, translating failures into `InvalidUtf8Error`."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidUtf8Error(exc.reason) from exc
