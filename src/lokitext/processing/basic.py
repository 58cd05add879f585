"""Basic string shaping: split, join, case and trim."""
from typing import Iterable, List


def split_text(text: str, delimiter: str) -> List[str]:
    """Split *text* on every occurrence of *delimiter*.

    Empty fields are preserved (``"a,,b"`` → ``["a", "", "b"]``). An empty
    delimiter raises ValueError.
    """
    return text.split(delimiter)


def join_text(parts: Iterable[str], delimiter: str) -> str:
    return delimiter.join(parts)


def to_uppercase(text: str) -> str:
    return text.upper()


def to_lowercase(text: str) -> str:
    return text.lower()


def trim_whitespace(text: str) -> str:
    return text.strip()
