from __future__ import annotations

import os
import random
import unittest
from unittest.mock import patch

from lokitext import (
    SEARCH_ALGORITHMS,
    AhoCorasickAutomaton,
    PatternMatch,
    aho_corasick_search,
    boyer_moore_horspool_search,
    boyer_moore_search,
    find_all_occurrences,
    kmp_search,
    rabin_karp_search,
    substring_search,
    z_algorithm_search,
)
from lokitext.search.substring import build_bad_char_table, build_horspool_table, build_lps, z_array

SENTENCE = "The quick brown fox jumps over the lazy dog"

SEARCHERS = [
    kmp_search,
    boyer_moore_search,
    boyer_moore_horspool_search,
    z_algorithm_search,
    rabin_karp_search,
]

# (text, pattern, expected byte offset)
CASES = [
    (SENTENCE, "quick", 4),
    (SENTENCE, "dog", 40),
    (SENTENCE, "The", 0),
    (SENTENCE, "the", 31),
    (SENTENCE, "cat", None),
    ("zabcd", "abcd", 1),
    ("abcabcabd", "abcabd", 3),
    ("aaaaab", "aab", 3),
    ("aaaa", "aa", 0),
    ("a", "a", 0),
    ("ba", "a", 1),
    ("ab", "b", 1),
    ("abc", "abcd", None),
    ("", "a", None),
    ("abc", "", None),
    ("naïve café", "café", 7),
    ("xxyxxyxxz", "xxz", 6),
]


def _brute_force(text: bytes, pattern: bytes):
    if not text or not pattern:
        return None
    idx = text.find(pattern)
    return None if idx < 0 else idx


def _random_cases(seed: int, count: int):
    rng = random.Random(seed)
    for _ in range(count):
        text = "".join(rng.choice("ab") for _ in range(rng.randint(0, 24)))
        pattern = "".join(rng.choice("ab") for _ in range(rng.randint(1, 5)))
        yield text, pattern


# --------------------------------------------------------------------------- #
#  Single-pattern algorithms                                                  #
# --------------------------------------------------------------------------- #
class SubstringSearchTests(unittest.TestCase):
    def test_known_offsets(self) -> None:
        for searcher in SEARCHERS:
            for text, pattern, expected in CASES:
                with self.subTest(algorithm=searcher.__name__, text=text, pattern=pattern):
                    self.assertEqual(searcher(text, pattern), expected)

    def test_all_algorithms_agree_with_brute_force(self) -> None:
        for text, pattern in _random_cases(seed=1234, count=400):
            expected = _brute_force(text.encode(), pattern.encode())
            for searcher in SEARCHERS:
                with self.subTest(algorithm=searcher.__name__, text=text, pattern=pattern):
                    self.assertEqual(searcher(text, pattern), expected)

    def test_accepts_bytes(self) -> None:
        for searcher in SEARCHERS:
            self.assertEqual(searcher(b"\x00\xff\x10\xff", b"\xff\x10"), 1)

    def test_find_all_occurrences(self) -> None:
        self.assertEqual(find_all_occurrences("aaaa", "aa"), [0, 1, 2])
        self.assertEqual(find_all_occurrences(SENTENCE, "o"), [12, 17, 26, 41])
        self.assertEqual(find_all_occurrences("abc", ""), [])

    def test_substring_search_dispatch(self) -> None:
        self.assertEqual(set(SEARCH_ALGORITHMS),
                         {"kmp", "boyer_moore", "boyer_moore_horspool", "z_algorithm", "rabin_karp"})
        for name in SEARCH_ALGORITHMS:
            self.assertEqual(substring_search(SENTENCE, "quick", algorithm=name), 4)
        self.assertEqual(substring_search(SENTENCE, "fox", algorithm="Boyer-Moore"), 16)
        self.assertEqual(substring_search(SENTENCE, "fox"), 16)

    def test_substring_search_unknown_algorithm(self) -> None:
        with self.assertRaises(ValueError):
            substring_search(SENTENCE, "fox", algorithm="naive")


class PreprocessingTableTests(unittest.TestCase):
    def test_lps(self) -> None:
        self.assertEqual(build_lps(b"abcabd"), [0, 0, 0, 1, 2, 0])
        self.assertEqual(build_lps(b"aabaaab"), [0, 1, 0, 1, 2, 2, 3])

    def test_bad_char_table(self) -> None:
        table = build_bad_char_table(b"abcd")
        self.assertEqual(table[ord("d")], 0)
        self.assertEqual(table[ord("a")], 3)
        self.assertEqual(table[ord("z")], 4)

    def test_horspool_table_ignores_last_byte(self) -> None:
        table = build_horspool_table(b"abcd")
        self.assertEqual(table[ord("d")], 4)
        self.assertEqual(table[ord("c")], 1)
        self.assertEqual(table[ord("a")], 3)

    def test_z_array(self) -> None:
        self.assertEqual(z_array(b"aabxaab"), [0, 1, 0, 0, 3, 1, 0])

    def test_trace_logging(self) -> None:
        with patch.dict(os.environ, {"LOKITEXT_TRACE": "1"}):
            with self.assertLogs("lokitext.search.substring", level="DEBUG") as logs:
                kmp_search("abcabd", "abd")
        self.assertTrue(any("lps" in line for line in logs.output))


# --------------------------------------------------------------------------- #
#  Aho-Corasick                                                               #
# --------------------------------------------------------------------------- #
class AhoCorasickTests(unittest.TestCase):
    def test_sentence(self) -> None:
        self.assertEqual(
            aho_corasick_search(SENTENCE, ["quick", "fox", "dog"]),
            [(4, "quick"), (16, "fox"), (40, "dog")],
        )

    def test_match_records(self) -> None:
        first = aho_corasick_search(SENTENCE, ["fox"])[0]
        self.assertIsInstance(first, PatternMatch)
        self.assertEqual(first.start, 16)
        self.assertEqual(first.pattern, "fox")

    def test_failure_links_and_output_propagation(self) -> None:
        self.assertEqual(
            aho_corasick_search("ushers", ["he", "she", "his", "hers"]),
            [(2, "he"), (1, "she"), (2, "hers")],
        )

    def test_overlapping_matches(self) -> None:
        self.assertEqual(
            aho_corasick_search("aaa", ["a", "aa"]),
            [(0, "a"), (1, "a"), (0, "aa"), (2, "a"), (1, "aa")],
        )

    def test_duplicates_are_all_reported(self) -> None:
        self.assertEqual(aho_corasick_search("ab", ["ab", "ab"]), [(0, "ab"), (0, "ab")])

    def test_empty_inputs(self) -> None:
        self.assertEqual(aho_corasick_search("", ["a"]), [])
        self.assertEqual(aho_corasick_search("abc", []), [])

    def test_empty_pattern_is_skipped(self) -> None:
        with self.assertLogs("lokitext.search.aho_corasick", level="WARNING"):
            self.assertEqual(aho_corasick_search("ab", ["", "b"]), [(1, "b")])

    def test_byte_offsets(self) -> None:
        self.assertEqual(aho_corasick_search("naïve café", ["café", "ï"]), [(2, "ï"), (7, "café")])

    def test_single_pattern_matches_brute_force(self) -> None:
        for text, pattern in _random_cases(seed=99, count=300):
            found = [m.start for m in aho_corasick_search(text, [pattern])]
            with self.subTest(text=text, pattern=pattern):
                self.assertEqual(found, find_all_occurrences(text, pattern))

    def test_automaton_is_reusable(self) -> None:
        automaton = AhoCorasickAutomaton(["he", "she", "his", "hers"])
        self.assertEqual(len(automaton), 4)
        self.assertEqual(automaton.state_count, 10)
        self.assertEqual(automaton.search("his"), [(0, "his")])
        self.assertEqual(list(automaton.iter_matches("she")), [(1, "he"), (0, "she")])
        self.assertEqual(automaton.patterns, ["he", "she", "his", "hers"])


if __name__ == "__main__":
    unittest.main()
