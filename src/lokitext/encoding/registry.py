"""
CodecRegistry

Name-based lookup for the reversible text codecs, so callers can pick a codec
from configuration or user input instead of importing a specific function.

Built-ins are registered lazily: `CodecRegistry.default()` only records
builder callbacks and a codec object is created on its first lookup.
"""
from dataclasses import dataclass
from typing import Callable, Dict, List

from lokitext.core.interfaces.codec import CodecProtocol
from lokitext.encoding import escape, radix


@dataclass(frozen=True)
class FunctionCodec(CodecProtocol):
    """Codec backed by a pair of plain encode/decode functions."""
    name: str
    encoder: Callable[[str], str]
    decoder: Callable[[str], str]

    def encode(self, text: str) -> str:
        return self.encoder(text)

    def decode(self, encoded: str) -> str:
        return self.decoder(encoded)


class CodecRegistry:
    def __init__(self) -> None:
        self._by_name: Dict[str, CodecProtocol] = {}
        self._lazy_builders: Dict[str, Callable[[], CodecProtocol]] = {}

    @classmethod
    def default(cls) -> 'CodecRegistry':
        """Build a registry holding every built-in codec."""
        reg = cls()
        builtins = {
            'base64': (radix.encode_base64, radix.decode_base64),
            'hex': (radix.encode_hex, radix.decode_hex),
            'binary': (radix.to_binary, radix.from_binary),
            'url': (escape.encode_url, escape.decode_url),
            'html': (escape.encode_html_entities, escape.decode_html_entities),
            'rot13': (escape.encode_rot13, escape.decode_rot13),
        }
        for name, (enc, dec) in builtins.items():
            reg.register_lazy(name, builder=lambda n=name, e=enc, d=dec: FunctionCodec(n, e, d))
        return reg

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().lower()

    def register(self, name: str, codec: CodecProtocol) -> None:
        key = self._key(name)
        self._by_name[key] = codec
        self._lazy_builders.pop(key, None)

    def register_lazy(self, name: str, *, builder: Callable[[], CodecProtocol]) -> None:
        key = self._key(name)
        self._lazy_builders[key] = builder
        self._by_name.pop(key, None)

    def names(self) -> List[str]:
        return sorted({*self._by_name, *self._lazy_builders})

    def __contains__(self, name: str) -> bool:
        key = self._key(name)
        return key in self._by_name or key in self._lazy_builders

    def get(self, name: str) -> CodecProtocol:
        """Return the codec registered under *name* (case-insensitive).

        Raises:
            KeyError: If no codec is registered under that name.
        """
        key = self._key(name)
        codec = self._by_name.get(key)
        if codec is not None:
            return codec
        builder = self._lazy_builders.get(key)
        if builder is None:
            raise KeyError(f"unknown codec: {name!r}")
        codec = builder()
        self.register(key, codec)
        return codec

    def encode_with(self, name: str, text: str) -> str:
        return self.get(name).encode(text)

    def decode_with(self, name: str, encoded: str) -> str:
        return self.get(name).decode(encoded)


_default_registry = CodecRegistry.default()


def encode_with(name: str, text: str) -> str:
    return _default_registry.encode_with(name, text)


def decode_with(name: str, encoded: str) -> str:
    return _default_registry.decode_with(name, encoded)
