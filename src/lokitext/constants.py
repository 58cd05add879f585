"""Project-wide constants used across modules.

Alphabets and lookup tables live here so codecs, transforms and tests share
a single source of truth.
"""
from __future__ import annotations

import string

ROOT_LOGGER: str = "lokitext"

# Environment switches, read at call time.
ENV_TRACE: str = "LOKITEXT_TRACE"
ENV_VERSION: str = "LOKITEXT_VERSION"
ENV_LOG_LEVEL: str = "LOKITEXT_LOG_LEVEL"
ENV_LOG_JSON: str = "LOKITEXT_LOG_JSON"

BASE64_ALPHABET: str = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"
BASE64_PAD: str = "="

HEX_DIGITS: frozenset[str] = frozenset(string.hexdigits)

# RFC 3986 unreserved set.
URL_UNRESERVED: frozenset[int] = frozenset(
    (string.ascii_letters + string.digits + "-_.~").encode("ascii")
)

HTML_ESCAPES: dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
}

HTML_UNESCAPES: dict[str, str] = {
    "&lt;": "<",
    "&gt;": ">",
    "&amp;": "&",
    "&quot;": '"',
    "&#x27;": "'",
    "&#39;": "'",
}

LEET_MAP: dict[str, str] = {
    "a": "4",
    "e": "3",
    "i": "1",
    "o": "0",
    "s": "5",
    "t": "7",
}

VOWELS: frozenset[str] = frozenset("aeiouAEIOU")

# Rabin-Karp rolling hash parameters.
RK_BASE: int = 256
RK_PRIME: int = 101
