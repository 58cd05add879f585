"""Dispatch single-pattern searches by algorithm name."""
from typing import Dict, Optional

from lokitext.core.interfaces.search import SubstringSearchProtocol, TextLike
from lokitext.search.substring import (
    boyer_moore_horspool_search,
    boyer_moore_search,
    kmp_search,
    rabin_karp_search,
    z_algorithm_search,
)

SEARCH_ALGORITHMS: Dict[str, SubstringSearchProtocol] = {
    'kmp': kmp_search,
    'boyer_moore': boyer_moore_search,
    'boyer_moore_horspool': boyer_moore_horspool_search,
    'z_algorithm': z_algorithm_search,
    'rabin_karp': rabin_karp_search,
}


def substring_search(text: TextLike, pattern: TextLike, algorithm: str = 'kmp') -> Optional[int]:
    """Run the named algorithm; names accept ``-`` in place of ``_``.

    Raises:
        ValueError: If *algorithm* is not one of `SEARCH_ALGORITHMS`.
    """
    key = algorithm.strip().lower().replace('-', '_')
    try:
        searcher = SEARCH_ALGORITHMS[key]
    except KeyError:
        known = ', '.join(sorted(SEARCH_ALGORITHMS))
        raise ValueError(f'unknown search algorithm {algorithm!r} (expected one of: {known})') from None
    return searcher(text, pattern)
