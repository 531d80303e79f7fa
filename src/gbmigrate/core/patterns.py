"""Regex helpers over whole-document strings with a compiled-pattern cache"""

import re
from typing import Callable, NamedTuple, Optional

from gbmigrate.core.errors import PatternNotFoundError


class MatchResult(NamedTuple):
    """Outcome of a single search: whether it matched and groups 1..n."""
    matched: bool
    groups: tuple[Optional[str], ...] = ()


class PatternCache:
    """Maps pattern text to its compiled regex, compiling on first use."""

    def __init__(self) -> None:
        self._compiled: dict[str, re.Pattern] = {}

    def __len__(self) -> int:
        return len(self._compiled)

    def __contains__(self, pattern: str) -> bool:
        return pattern in self._compiled

    def compile(self, pattern: str) -> re.Pattern:
        rx = self._compiled.get(pattern)
        if rx is None:
            rx = self._compiled[pattern] = re.compile(pattern)
        return rx

    def match(self, pattern: str, text: str) -> MatchResult:
        """Search text for pattern; groups are empty when nothing matched."""
        m = self.compile(pattern).search(text)
        if m is None:
            return MatchResult(False)
        return MatchResult(True, m.groups())

    def replace_all(self, pattern: str, text: str, repl: str) -> str:
        return self.compile(pattern).sub(repl, text)

    def replace_func(self, pattern: str, text: str, fn: Callable[[re.Match], str]) -> str:
        return self.compile(pattern).sub(fn, text)

    def replace_first(self, pattern: str, text: str, repl: str) -> str:
        """Replace the first match literally; raise PatternNotFoundError if none."""
        m = self.compile(pattern).search(text)
        if m is None:
            raise PatternNotFoundError(f"pattern {pattern!r} did not match")
        return text[:m.start()] + repl + text[m.end():]
