"""Codec protocol definitions."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CodecProtocol(Protocol):
    """Protocol for reversible text codecs.

    Implementations are expected to satisfy ``decode(encode(x)) == x`` for
    every text they accept, and to raise a `DecodeError` subclass from
    ``decode`` on malformed input.
    """

    name: str

    def encode(self, text: str) -> str:
        ...

    def decode(self, encoded: str) -> str:
        ...
