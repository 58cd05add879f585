"""
radix – Base64, hexadecimal and binary codecs.

All encoders work on the UTF-8 bytes of their input; all decoders rebuild
those bytes and decode them strictly, raising `InvalidUtf8Error` when the
result is not valid UTF-8.
"""

from typing import List

from lokitext.constants import BASE64_ALPHABET, BASE64_PAD, HEX_DIGITS
from lokitext.core.errors import (
    InvalidBinaryError,
    InvalidCharacterError,
    InvalidHexError,
    InvalidLengthError,
    OddLengthError,
    utf8_or_raise,
)

_BASE64_INDEX = {ch: i for i, ch in enumerate(BASE64_ALPHABET)}


def encode_base64(text: str) -> str:
    """Encode *text* as padded standard Base64.

    Each 3-byte group becomes four characters; a trailing 1-byte group emits
    two characters plus ``==`` and a 2-byte group three characters plus ``=``.
    """
    data = text.encode("utf-8")
    out: List[str] = []
    for start in range(0, len(data), 3):
        chunk = data[start:start + 3]
        buffer = 0
        for i, byte in enumerate(chunk):
            buffer |= byte << (16 - i * 8)
        padding = 3 - len(chunk)
        for i in range(4 - padding):
            out.append(BASE64_ALPHABET[(buffer >> (18 - i * 6)) & 0x3F])
        out.append(BASE64_PAD * padding)
    return "".join(out)


def decode_base64(encoded: str) -> str:
    """Decode Base64; the first ``=`` ends the input.

    Raises:
        InvalidCharacterError: For any character outside the alphabet,
            whitespace included.
        InvalidUtf8Error: When the recovered bytes are not UTF-8.
    """
    decoded = bytearray()
    buffer = 0
    bits = 0
    for position, ch in enumerate(encoded):
        if ch == BASE64_PAD:
            break
        index = _BASE64_INDEX.get(ch)
        if index is None:
            raise InvalidCharacterError(ch, position)
        buffer = ((buffer << 6) | index) & 0xFFFFFF
        bits += 6
        if bits >= 8:
            bits -= 8
            decoded.append((buffer >> bits) & 0xFF)
    return utf8_or_raise(bytes(decoded))


def encode_hex(text: str) -> str:
    return text.encode("utf-8").hex()


def decode_hex(encoded: str) -> str:
    """Decode pairs of hex digits (either case).

    Raises:
        OddLengthError: When the digit count is odd.
        InvalidHexError: With the offset of the offending pair.
        InvalidUtf8Error: When the bytes are not UTF-8.
    """
    if len(encoded) % 2:
        raise OddLengthError(len(encoded))
    decoded = bytearray()
    for position in range(0, len(encoded), 2):
        pair = encoded[position:position + 2]
        if pair[0] not in HEX_DIGITS or pair[1] not in HEX_DIGITS:
            raise InvalidHexError(position)
        decoded.append(int(pair, 16))
    return utf8_or_raise(bytes(decoded))


def to_binary(text: str) -> str:
    """Render each UTF-8 byte as eight ``0``/``1`` characters, MSB first."""
    return "".join(format(byte, "08b") for byte in text.encode("utf-8"))


def from_binary(encoded: str) -> str:
    if len(encoded) % 8:
        raise InvalidLengthError(len(encoded), 8)
    decoded = bytearray()
    for position in range(0, len(encoded), 8):
        group = encoded[position:position + 8]
        if any(bit not in "01" for bit in group):
            raise InvalidBinaryError(position)
        decoded.append(int(group, 2))
    return utf8_or_raise(bytes(decoded))
