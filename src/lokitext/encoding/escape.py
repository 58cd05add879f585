"""
escape – Percent (URL), HTML-entity and ROT13 codecs.
"""

import re
import string
from typing import List

from lokitext.constants import HEX_DIGITS, HTML_ESCAPES, HTML_UNESCAPES, URL_UNRESERVED
from lokitext.core.errors import IncompleteEscapeError, InvalidHexError, utf8_or_raise

_HTML_ESCAPE_RX = re.compile("[" + re.escape("".join(HTML_ESCAPES)) + "]")
_HTML_ENTITY_RX = re.compile("|".join(re.escape(entity) for entity in HTML_UNESCAPES))

_ROT13_TABLE = str.maketrans(
    string.ascii_lowercase + string.ascii_uppercase,
    string.ascii_lowercase[13:] + string.ascii_lowercase[:13]
    + string.ascii_uppercase[13:] + string.ascii_uppercase[:13],
)


def encode_url(text: str) -> str:
    """Percent-encode every byte outside the RFC 3986 unreserved set.

    Escapes use uppercase hex digits: ``"hello world!"`` →
    ``"hello%20world%21"``.
    """
    out: List[str] = []
    for byte in text.encode("utf-8"):
        if byte in URL_UNRESERVED:
            out.append(chr(byte))
        else:
            out.append(f"%{byte:02X}")
    return "".join(out)


def decode_url(encoded: str) -> str:
    """Reverse percent-encoding; ``+`` decodes to a space.

    Positions reported in errors are character offsets of the ``%`` sign.
    Characters that are not part of an escape are copied through as their
    UTF-8 bytes.
    """
    decoded = bytearray()
    i = 0
    n = len(encoded)
    while i < n:
        ch = encoded[i]
        if ch == "%":
            if n - i < 3:
                raise IncompleteEscapeError(i)
            hi, lo = encoded[i + 1], encoded[i + 2]
            if hi not in HEX_DIGITS or lo not in HEX_DIGITS:
                raise InvalidHexError(i)
            decoded.append(int(hi + lo, 16))
            i += 3
            continue
        if ch == "+":
            decoded.append(0x20)
        else:
            decoded.extend(ch.encode("utf-8"))
        i += 1
    return utf8_or_raise(bytes(decoded))


def encode_html_entities(text: str) -> str:
    return _HTML_ESCAPE_RX.sub(lambda m: HTML_ESCAPES[m.group(0)], text)


def decode_html_entities(encoded: str) -> str:
    """Replace the supported entities in a single left-to-right pass.

    Decoded output is never rescanned, so ``"&amp;lt;"`` becomes ``"&lt;"``
    rather than ``"<"``. Only ``&lt; &gt; &amp; &quot; &#x27; &#39;`` are
    recognised.
    """
    return _HTML_ENTITY_RX.sub(lambda m: HTML_UNESCAPES[m.group(0)], encoded)


def encode_rot13(text: str) -> str:
    return text.translate(_ROT13_TABLE)


def decode_rot13(encoded: str) -> str:
    return encoded.translate(_ROT13_TABLE)
