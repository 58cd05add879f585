"""Reversible text codecs: Base64, hex, binary, URL, HTML entities and ROT13."""
from .escape import (
    decode_html_entities,
    decode_rot13,
    decode_url,
    encode_html_entities,
    encode_rot13,
    encode_url,
)
from .radix import decode_base64, decode_hex, encode_base64, encode_hex, from_binary, to_binary
from .registry import CodecRegistry, FunctionCodec, decode_with, encode_with

__all__ = [
    "CodecRegistry",
    "FunctionCodec",
    "decode_base64",
    "decode_hex",
    "decode_html_entities",
    "decode_rot13",
    "decode_url",
    "decode_with",
    "encode_base64",
    "encode_hex",
    "encode_html_entities",
    "encode_rot13",
    "encode_url",
    "encode_with",
    "from_binary",
    "to_binary",
]
