from typing import NamedTuple


class PatternMatch(NamedTuple):
    """A multi-pattern hit: byte offset where *pattern* starts in the text.

    Being a tuple, it compares equal to a plain ``(start, pattern)`` pair.
    """
    start: int
    pattern: str
