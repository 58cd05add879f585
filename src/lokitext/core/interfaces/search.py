"""Search protocol definitions."""
from __future__ import annotations

from typing import List, Optional, Protocol, Sequence, Union

from lokitext.core.models import PatternMatch

TextLike = Union[str, bytes]


class SubstringSearchProtocol(Protocol):
    """Callable returning the byte offset of the first occurrence, or None."""

    def __call__(self, text: TextLike, pattern: TextLike) -> Optional[int]:
        ...


class MultiPatternSearchProtocol(Protocol):
    """Callable reporting every (overlapping) occurrence of every pattern."""

    def __call__(self, text: TextLike, patterns: Sequence[str]) -> List[PatternMatch]:
        ...
