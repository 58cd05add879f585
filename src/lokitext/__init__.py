"""lokitext – pure text transformations, codecs and pattern search.

Every public function is importable from the package root::

    from lokitext import encode_base64, kmp_search, to_snake_case
"""
from lokitext.core.errors import (
    DecodeError,
    IncompleteEscapeError,
    InvalidBinaryError,
    InvalidCharacterError,
    InvalidHexError,
    InvalidLengthError,
    InvalidUtf8Error,
    OddLengthError,
)
from lokitext.core.models import PatternMatch
from lokitext.encoding import (
    CodecRegistry,
    decode_base64,
    decode_hex,
    decode_html_entities,
    decode_rot13,
    decode_url,
    decode_with,
    encode_base64,
    encode_hex,
    encode_html_entities,
    encode_rot13,
    encode_url,
    encode_with,
    from_binary,
    to_binary,
)
from lokitext.logging.helpers import get_logger, setup_base_logger
from lokitext.processing.basic import join_text, split_text, to_lowercase, to_uppercase, trim_whitespace
from lokitext.processing.casing import (
    capitalize_words,
    invert_case,
    to_alternating_case,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_screaming_snake_case,
    to_snake_case,
    to_title_case,
)
from lokitext.processing.text_ops import (
    RegexToolkit,
    count_pattern,
    extract_pattern_all,
    find_pattern,
    replace_pattern,
)
from lokitext.processing.transform import (
    extract_numbers,
    is_palindrome,
    normalize_whitespace,
    remove_consonants,
    remove_punctuation,
    remove_special_characters,
    remove_vowels,
    repeat_chars,
    replace_spaces_with_underscores,
    reverse_string,
    reverse_words,
    to_leet_speak,
    truncate,
)
from lokitext.search import (
    SEARCH_ALGORITHMS,
    AhoCorasickAutomaton,
    aho_corasick_search,
    boyer_moore_horspool_search,
    boyer_moore_search,
    find_all_occurrences,
    kmp_search,
    rabin_karp_search,
    substring_search,
    z_algorithm_search,
)
from lokitext.utils import is_empty_or_whitespace, to_byte_vector, to_string

__version__ = '0.3.0'

__all__ = [
    # basic
    'split_text',
    'join_text',
    'to_uppercase',
    'to_lowercase',
    'trim_whitespace',
    # transforms
    'reverse_string',
    'reverse_words',
    'is_palindrome',
    'remove_punctuation',
    'remove_special_characters',
    'extract_numbers',
    'remove_vowels',
    'remove_consonants',
    'normalize_whitespace',
    'replace_spaces_with_underscores',
    'truncate',
    'repeat_chars',
    'to_leet_speak',
    # casing
    'capitalize_words',
    'to_title_case',
    'to_camel_case',
    'to_pascal_case',
    'to_snake_case',
    'to_kebab_case',
    'to_screaming_snake_case',
    'to_alternating_case',
    'invert_case',
    # encoding
    'encode_base64',
    'decode_base64',
    'encode_hex',
    'decode_hex',
    'encode_url',
    'decode_url',
    'encode_html_entities',
    'decode_html_entities',
    'encode_rot13',
    'decode_rot13',
    'to_binary',
    'from_binary',
    'CodecRegistry',
    'encode_with',
    'decode_with',
    # regex
    'RegexToolkit',
    'find_pattern',
    'replace_pattern',
    'count_pattern',
    'extract_pattern_all',
    # substring / multi-pattern search
    'kmp_search',
    'boyer_moore_search',
    'boyer_moore_horspool_search',
    'z_algorithm_search',
    'rabin_karp_search',
    'find_all_occurrences',
    'substring_search',
    'SEARCH_ALGORITHMS',
    'AhoCorasickAutomaton',
    'aho_corasick_search',
    'PatternMatch',
    # utils
    'is_empty_or_whitespace',
    'to_byte_vector',
    'to_string',
    # errors
    'DecodeError',
    'IncompleteEscapeError',
    'InvalidBinaryError',
    'InvalidCharacterError',
    'InvalidHexError',
    'InvalidLengthError',
    'InvalidUtf8Error',
    'OddLengthError',
    # logging
    'get_logger',
    'setup_base_logger',
]
