"""
lokitext.utils – Small conversions between text and raw bytes.
"""
from typing import Iterable, List

from lokitext.processing.basic import trim_whitespace


def is_empty_or_whitespace(text: str) -> bool:
    return not text.strip()


def to_byte_vector(text: str) -> List[int]:
    """Return the UTF-8 encoding of *text* as a list of byte values."""
    return list(text.encode("utf-8"))


def to_string(data: Iterable[int]) -> str:
    """Decode UTF-8 *data* leniently; invalid sequences become U+FFFD."""
    return bytes(data).decode("utf-8", errors="replace")


__all__ = ["is_empty_or_whitespace", "to_byte_vector", "to_string", "trim_whitespace"]
