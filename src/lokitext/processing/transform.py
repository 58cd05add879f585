"""
transform – Structural, character-level text transforms.

Every function is a single pass over the input characters. Filters that the
public contract defines over ASCII (punctuation, vowels, consonants, leet)
leave every other character alone.
"""

import re
import string
from typing import List

from lokitext.constants import LEET_MAP, VOWELS

_DIGITS_RX = re.compile(r"\d+")
_PUNCTUATION = frozenset(string.punctuation)
_ASCII_LETTERS = frozenset(string.ascii_letters)
_LEET_TABLE = str.maketrans({**LEET_MAP, **{k.upper(): v for k, v in LEET_MAP.items()}})


def reverse_string(text: str) -> str:
    return text[::-1]


def reverse_words(text: str) -> str:
    """Reverse the order of whitespace-separated words, joined by one space."""
    return " ".join(reversed(text.split()))


def is_palindrome(text: str) -> bool:
    """True when the alphanumeric characters read the same in both directions.

    Comparison ignores case; punctuation and whitespace are dropped first, so
    ``"A man, a plan, a canal: Panama"`` qualifies.
    """
    cleaned = "".join(ch for ch in text if ch.isalnum()).lower()
    return cleaned == cleaned[::-1]


def remove_punctuation(text: str) -> str:
    return "".join(ch for ch in text if ch not in _PUNCTUATION)


def remove_special_characters(text: str) -> str:
    return "".join(ch for ch in text if ch.isalnum() or ch.isspace())


def extract_numbers(text: str) -> List[str]:
    return _DIGITS_RX.findall(text)


def remove_vowels(text: str) -> str:
    return "".join(ch for ch in text if ch not in VOWELS)


def remove_consonants(text: str) -> str:
    return "".join(ch for ch in text if ch not in _ASCII_LETTERS or ch in VOWELS)


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim both ends."""
    return " ".join(text.split())


def replace_spaces_with_underscores(text: str) -> str:
    return text.replace(" ", "_")


def truncate(text: str, length: int) -> str:
    """Keep the first *length* characters (not bytes) of *text*."""
    if length < 0:
        raise ValueError("length must be non-negative")
    if len(text) <= length:
        return text
    return text[:length]


def repeat_chars(text: str, times: int) -> str:
    """Repeat every character *times* times (``"ab", 2`` → ``"aabb"``)."""
    return "".join(ch * times for ch in text)


def to_leet_speak(text: str) -> str:
    return text.translate(_LEET_TABLE)
