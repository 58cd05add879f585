"""
substring – Classical single-pattern search algorithms.

Every searcher takes `str` (searched as UTF-8) or `bytes` for both text and
pattern and returns the byte offset of the first occurrence, or None. An empty
pattern, an empty text or a pattern longer than the text is never found.
All five algorithms report the same offset for the same input.
"""

from typing import List, Optional, Tuple

from lokitext.constants import RK_BASE, RK_PRIME
from lokitext.core.interfaces.search import TextLike
from lokitext.logging.helpers import get_logger, trace

_log = get_logger('search.substring')


def as_bytes(value: TextLike) -> bytes:
    if isinstance(value, str):
        return value.encode('utf-8')
    return bytes(value)


def _prepare(text: TextLike, pattern: TextLike) -> Optional[Tuple[bytes, bytes]]:
    t = as_bytes(text)
    p = as_bytes(pattern)
    if not p or not t or len(p) > len(t):
        return None
    return t, p


def build_lps(pattern: bytes) -> List[int]:
    """Longest proper prefix that is also a suffix, for every prefix length."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def _kmp_scan(t: bytes, p: bytes, lps: List[int], first_only: bool) -> List[int]:
    hits: List[int] = []
    m = len(p)
    k = 0
    for i, byte in enumerate(t):
        while k and byte != p[k]:
            k = lps[k - 1]
        if byte == p[k]:
            k += 1
        if k == m:
            hits.append(i - m + 1)
            if first_only:
                break
            k = lps[k - 1]
    return hits


def kmp_search(text: TextLike, pattern: TextLike) -> Optional[int]:
    prepared = _prepare(text, pattern)
    if prepared is None:
        return None
    t, p = prepared
    lps = build_lps(p)
    trace(_log, 'kmp lps table built', lps=lps)
    hits = _kmp_scan(t, p, lps, first_only=True)
    return hits[0] if hits else None


def find_all_occurrences(text: TextLike, pattern: TextLike) -> List[int]:
    """Return every start offset of *pattern*, overlaps included."""
    prepared = _prepare(text, pattern)
    if prepared is None:
        return []
    t, p = prepared
    return _kmp_scan(t, p, build_lps(p), first_only=False)


def build_bad_char_table(pattern: bytes) -> List[int]:
    """Distance from each byte's last occurrence to the pattern end.

    ``table[c] = m - 1 - last_index(c)``; bytes absent from the pattern map
    to ``m``.
    """
    m = len(pattern)
    table = [m] * 256
    for i, byte in enumerate(pattern):
        table[byte] = m - 1 - i
    return table


def boyer_moore_search(text: TextLike, pattern: TextLike) -> Optional[int]:
    """Boyer-Moore with the bad-character rule only (no good-suffix rule)."""
    prepared = _prepare(text, pattern)
    if prepared is None:
        return None
    t, p = prepared
    n, m = len(t), len(p)
    bad_char = build_bad_char_table(p)
    trace(_log, 'boyer-moore table built', pattern_len=m)

    s = 0
    while s <= n - m:
        j = m - 1
        while j >= 0 and p[j] == t[s + j]:
            j -= 1
        if j < 0:
            return s
        last = m - 1 - bad_char[t[s + j]]
        s += max(1, j - last)
    return None


def build_horspool_table(pattern: bytes) -> List[int]:
    m = len(pattern)
    table = [m] * 256
    for i in range(m - 1):
        table[pattern[i]] = m - 1 - i
    return table


def boyer_moore_horspool_search(text: TextLike, pattern: TextLike) -> Optional[int]:
    prepared = _prepare(text, pattern)
    if prepared is None:
        return None
    t, p = prepared
    n, m = len(t), len(p)
    shift = build_horspool_table(p)
    trace(_log, 'horspool table built', pattern_len=m)

    s = 0
    while s <= n - m:
        j = m - 1
        while j >= 0 and p[j] == t[s + j]:
            j -= 1
        if j < 0:
            return s
        s += shift[t[s + m - 1]]
    return None


def z_array(data: bytes) -> List[int]:
    """Z-array of *data*; ``z[0]`` is left at 0."""
    n = len(data)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i < right:
            z[i] = min(right - i, z[i - left])
        while i + z[i] < n and data[z[i]] == data[i + z[i]]:
            z[i] += 1
        if i + z[i] > right:
            left, right = i, i + z[i]
    return z


def z_algorithm_search(text: TextLike, pattern: TextLike) -> Optional[int]:
    prepared = _prepare(text, pattern)
    if prepared is None:
        return None
    t, p = prepared
    m = len(p)
    # z values may run past m across the pattern/text seam.
    z = z_array(p + t)
    for i in range(m, len(z)):
        if z[i] >= m:
            return i - m
    return None


def rabin_karp_search(text: TextLike, pattern: TextLike) -> Optional[int]:
    """Rolling-hash search (base 256, modulus 101) with byte verification."""
    prepared = _prepare(text, pattern)
    if prepared is None:
        return None
    t, p = prepared
    n, m = len(t), len(p)
    high = pow(RK_BASE, m - 1, RK_PRIME)

    p_hash = 0
    t_hash = 0
    for i in range(m):
        p_hash = (p_hash * RK_BASE + p[i]) % RK_PRIME
        t_hash = (t_hash * RK_BASE + t[i]) % RK_PRIME

    for s in range(n - m + 1):
        if p_hash == t_hash and t[s:s + m] == p:
            return s
        if s < n - m:
            t_hash = ((t_hash - t[s] * high) * RK_BASE + t[s + m]) % RK_PRIME
    return None
