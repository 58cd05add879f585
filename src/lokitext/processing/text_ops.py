import logging
import re
from typing import List, Optional, Sequence, Tuple

from lokitext.logging.helpers import get_logger

ReplaceRule = Tuple[re.Pattern, str, bool]


class RegexToolkit:
    """Regex find/replace/count helpers that never raise on bad patterns.

    Patterns are compiled on every call. A pattern that fails to compile is
    logged at WARNING level and the operation degrades to a neutral result:
    `find_pattern` → None, `replace_pattern` → input unchanged,
    `count_pattern` → 0, `extract_pattern_all` → [].

    Parameters
    ----------
    logger:
        Optional logger instance for consistent log format.
    regex_delim:
        Single-character delimiter used to split /pattern/repl/flags specs.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None, regex_delim: str = '/') -> None:
        if not isinstance(regex_delim, str) or len(regex_delim) != 1:
            raise ValueError('regex_delim must be a single character string')
        self._log = logger or get_logger('processing.regex')
        self._delim = regex_delim

    def _compile(self, pattern: str, flags: int = 0) -> Optional[re.Pattern]:
        try:
            return re.compile(pattern, flags)
        except re.error as exc:
            self._log.warning('⚠  invalid regex %r: %s', pattern, exc)
            return None

    def find_pattern(self, text: str, pattern: str) -> Optional[str]:
        """Return capture group 1 of the first match, or None.

        None is also returned when the pattern has no groups or group 1 did
        not take part in the match.
        """
        regex = self._compile(pattern)
        if regex is None or regex.groups < 1:
            return None
        match = regex.search(text)
        if match is None:
            return None
        return match.group(1)

    def replace_pattern(self, text: str, pattern: str, replacement: str) -> str:
        """Replace every non-overlapping match (``re.sub`` replacement syntax)."""
        regex = self._compile(pattern)
        if regex is None:
            return text
        return regex.sub(replacement, text)

    def count_pattern(self, text: str, pattern: str) -> int:
        """Count non-overlapping matches; matching is always case-insensitive."""
        regex = self._compile(pattern, re.IGNORECASE)
        if regex is None:
            return 0
        return sum(1 for _ in regex.finditer(text))

    def extract_pattern_all(self, text: str, pattern: str) -> List[str]:
        """Return the full text of every non-overlapping match."""
        regex = self._compile(pattern)
        if regex is None:
            return []
        return [m.group(0) for m in regex.finditer(text)]

    def parse_replace_spec(self, spec: str) -> Optional[ReplaceRule]:
        """Parse a ``/pattern/replacement/flags`` spec.

        `/pattern/` deletes matches globally; flags are any of ``g`` (all
        matches, otherwise only the first), ``i``, ``m`` and ``s``. The
        delimiter may be escaped with a backslash inside any part. Returns
        None (after a warning) for malformed specs or invalid regexes.
        """
        if not spec.startswith(self._delim):
            self._log.warning('⚠  invalid replace spec (missing leading %s): %r', self._delim, spec)
            return None

        parts: List[str] = []
        buf: List[str] = []
        escaped = False
        for ch in spec[1:]:
            if escaped:
                if ch != self._delim:
                    buf.append('\\')
                buf.append(ch)
                escaped = False
            elif ch == '\\':
                escaped = True
            elif ch == self._delim:
                parts.append(''.join(buf))
                buf = []
            else:
                buf.append(ch)
        if escaped:
            buf.append('\\')
        parts.append(''.join(buf))

        if len(parts) not in {2, 3}:
            self._log.warning('⚠  invalid replace spec: %r', spec)
            return None

        pattern_src = parts[0]
        replacement = '' if len(parts) == 2 else parts[1]
        flag_src = parts[-1] if len(parts) == 3 else 'g'

        flags = 0
        if 'i' in flag_src:
            flags |= re.IGNORECASE
        if 'm' in flag_src:
            flags |= re.MULTILINE
        if 's' in flag_src:
            flags |= re.DOTALL

        regex = self._compile(pattern_src, flags)
        if regex is None:
            return None
        return regex, replacement, 'g' in flag_src

    def apply_replace_specs(self, text: str, specs: Sequence[str] | None) -> str:
        """Apply every valid spec in order; invalid ones are skipped."""
        for spec in specs or ():
            rule = self.parse_replace_spec(spec)
            if rule is None:
                continue
            regex, replacement, is_global = rule
            text = regex.sub(replacement, text, count=0 if is_global else 1)
        return text


_default = RegexToolkit()


def find_pattern(text: str, pattern: str) -> Optional[str]:
    return _default.find_pattern(text, pattern)


def replace_pattern(text: str, pattern: str, replacement: str) -> str:
    return _default.replace_pattern(text, pattern, replacement)


def count_pattern(text: str, pattern: str) -> int:
    return _default.count_pattern(text, pattern)


def extract_pattern_all(text: str, pattern: str) -> List[str]:
    return _default.extract_pattern_all(text, pattern)
