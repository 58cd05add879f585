"""
aho_corasick – Multi-pattern search over a trie with failure links.

The automaton works on UTF-8 bytes, so reported offsets are byte offsets just
like the single-pattern searchers in `lokitext.search.substring`.

Construction:
  1) Insert every pattern into a trie (goto function).
  2) Breadth-first pass: depth-1 states fail to the root; deeper states fail
     to the longest proper suffix of their label that is also a trie prefix.
  3) Each state's output list is extended with its failure state's outputs
     during the same pass, so the scan never walks failure links to report.
"""

import logging
from collections import deque
from typing import Dict, Iterator, List, Optional, Sequence

from lokitext.core.interfaces.search import TextLike
from lokitext.core.models import PatternMatch
from lokitext.logging.helpers import get_logger, trace
from lokitext.search.substring import as_bytes


class AhoCorasickAutomaton:
    """Reusable automaton over a fixed pattern list.

    Parameters
    ----------
    patterns:
        Patterns to search for, as `str` or `bytes`. Duplicates are kept and
        reported once each; empty patterns are skipped with a warning.
    logger:
        Optional logger instance for consistent log format.
    """

    def __init__(self, patterns: Sequence[TextLike], *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('search.aho_corasick')
        self._patterns: List[TextLike] = list(patterns)
        self._lengths: List[int] = []
        self._goto: List[Dict[int, int]] = [{}]
        self._fail: List[int] = [0]
        self._out: List[List[int]] = [[]]

        for index, pattern in enumerate(self._patterns):
            encoded = as_bytes(pattern)
            self._lengths.append(len(encoded))
            if not encoded:
                self._log.warning('⚠  skipping empty pattern at index %d', index)
                continue
            self._insert(encoded, index)
        self._link()
        trace(self._log, 'aho-corasick automaton built',
              patterns=len(self._patterns), states=self.state_count)

    def _insert(self, encoded: bytes, index: int) -> None:
        state = 0
        for byte in encoded:
            nxt = self._goto[state].get(byte)
            if nxt is None:
                nxt = len(self._goto)
                self._goto.append({})
                self._fail.append(0)
                self._out.append([])
                self._goto[state][byte] = nxt
            state = nxt
        self._out[state].append(index)

    def _link(self) -> None:
        queue = deque(self._goto[0].values())
        while queue:
            state = queue.popleft()
            for byte, child in self._goto[state].items():
                queue.append(child)
                fallback = self._fail[state]
                while fallback and byte not in self._goto[fallback]:
                    fallback = self._fail[fallback]
                self._fail[child] = self._goto[fallback].get(byte, 0)
                self._out[child] = sorted(self._out[child] + self._out[self._fail[child]])

    @property
    def patterns(self) -> List[TextLike]:
        return list(self._patterns)

    @property
    def state_count(self) -> int:
        return len(self._goto)

    def __len__(self) -> int:
        return len(self._patterns)

    def iter_matches(self, text: TextLike) -> Iterator[PatternMatch]:
        """Yield matches in completion order.

        Matches ending at the same byte come out in ascending pattern index
        order. Overlapping matches are all reported.
        """
        state = 0
        for position, byte in enumerate(as_bytes(text)):
            while state and byte not in self._goto[state]:
                state = self._fail[state]
            state = self._goto[state].get(byte, 0)
            for index in self._out[state]:
                yield PatternMatch(position + 1 - self._lengths[index], self._patterns[index])

    def search(self, text: TextLike) -> List[PatternMatch]:
        return list(self.iter_matches(text))


def aho_corasick_search(text: TextLike, patterns: Sequence[TextLike]) -> List[PatternMatch]:
    """Find every occurrence of every pattern in *text* in one pass.

    The automaton is built for this call only and discarded afterwards.
    """
    return AhoCorasickAutomaton(patterns).search(text)
