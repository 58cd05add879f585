"""
casing – Identifier-style case conversions.

The camel, Pascal, snake and kebab converters share one word splitter: runs
of whitespace, ``_`` and ``-`` separate words, and so does a lowercase letter
followed by an uppercase one (``helloWorld`` → ``hello``, ``World``). They
re-case ASCII letters only; other characters keep their case.
"""

import re
import string
from typing import List

_SEPARATORS_RX = re.compile(r"[\s_\-]+")
_HUMP_RX = re.compile(r"(?<=[a-z])(?=[A-Z])")

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ASCII_SWAP = str.maketrans(
    string.ascii_lowercase + string.ascii_uppercase,
    string.ascii_uppercase + string.ascii_lowercase,
)


def _upper(text: str) -> str:
    return text.translate(_ASCII_UPPER)


def _lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def split_words(text: str) -> List[str]:
    """Split *text* into words using separator runs and camel humps."""
    words: List[str] = []
    for chunk in _SEPARATORS_RX.split(text):
        if chunk:
            words.extend(w for w in _HUMP_RX.split(chunk) if w)
    return words


def _capitalized(word: str) -> str:
    return _upper(word[:1]) + _lower(word[1:])


def to_pascal_case(text: str) -> str:
    return "".join(_capitalized(w) for w in split_words(text))


def to_camel_case(text: str) -> str:
    words = split_words(text)
    if not words:
        return ""
    return _lower(words[0]) + "".join(_capitalized(w) for w in words[1:])


def to_snake_case(text: str) -> str:
    return "_".join(_lower(w) for w in split_words(text))


def to_kebab_case(text: str) -> str:
    return "-".join(_lower(w) for w in split_words(text))


def to_screaming_snake_case(text: str) -> str:
    return _upper(to_snake_case(text))


def capitalize_words(text: str) -> str:
    """Uppercase the first character of each whitespace-separated word.

    The rest of every word is left untouched and words are re-joined with a
    single space.
    """
    return " ".join(w[:1].upper() + w[1:] for w in text.split())


def to_title_case(text: str) -> str:
    """Like `capitalize_words`, but lowercases the remainder of each word."""
    return " ".join(w[:1].upper() + w[1:].lower() for w in text.split())


def to_alternating_case(text: str) -> str:
    """Alternate lower/upper over alphabetic characters, starting lower.

    Non-alphabetic characters are copied through and do not advance the
    alternation (``"a b"`` → ``"a B"``).
    """
    out: List[str] = []
    index = 0
    for ch in text:
        if ch.isalpha():
            out.append(ch.lower() if index % 2 == 0 else ch.upper())
            index += 1
        else:
            out.append(ch)
    return "".join(out)


def invert_case(text: str) -> str:
    return text.translate(_ASCII_SWAP)
