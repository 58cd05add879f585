"""Pattern search: single-pattern algorithms, Aho-Corasick and name dispatch."""
from .aho_corasick import AhoCorasickAutomaton, aho_corasick_search
from .registry import SEARCH_ALGORITHMS, substring_search
from .substring import (
    boyer_moore_horspool_search,
    boyer_moore_search,
    find_all_occurrences,
    kmp_search,
    rabin_karp_search,
    z_algorithm_search,
)

__all__ = [
    "AhoCorasickAutomaton",
    "SEARCH_ALGORITHMS",
    "aho_corasick_search",
    "boyer_moore_horspool_search",
    "boyer_moore_search",
    "find_all_occurrences",
    "kmp_search",
    "rabin_karp_search",
    "substring_search",
    "z_algorithm_search",
]
