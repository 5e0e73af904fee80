"""
Shared pattern-matching helpers for the heuristic extractor and enhancer.

A heuristic is an ordered list of ``RegexMatcher`` values; the first matcher
that yields a non-empty capture wins.
"""

import re
from typing import Iterable, Iterator, List, Optional, Pattern

_TRAILING_PUNCT = re.compile(r"[,.]$")


class RegexMatcher:
    """A compiled pattern that yields one capture group (or the whole match)."""

    __slots__ = ("name", "pattern", "group")

    def __init__(self, name: str, pattern: str, flags: int = re.IGNORECASE, group: int = 1):
        self.name = name
        self.pattern: Pattern[str] = re.compile(pattern, flags)
        self.group = group

    def try_match(self, text: str) -> Optional[str]:
        match = self.pattern.search(text)
        if not match:
            return None
        value = match.group(self.group)
        return value or None

    def find_all(self, text: str) -> Iterator[str]:
        """Yield the text of every non-overlapping match."""
        for match in self.pattern.finditer(text):
            value = match.group(self.group)
            if value:
                yield value

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    def __repr__(self) -> str:
        return f"RegexMatcher({self.name!r}, {self.pattern.pattern!r})"


def first_match(matchers: Iterable[RegexMatcher], text: str) -> Optional[str]:
    """Return the capture of the first matcher that matches, in priority order."""
    for matcher in matchers:
        value = matcher.try_match(text)
        if value:
            return value
    return None


def any_match(matchers: Iterable[RegexMatcher], text: str) -> bool:
    return any(m.matches(text) for m in matchers)


def strip_trailing_punctuation(value: str) -> str:
    """Trim whitespace and drop one trailing comma or period."""
    return _TRAILING_PUNCT.sub("", value.strip())


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """Case-insensitive substring check."""
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def unique_in_order(values: Iterable[str]) -> List[str]:
    seen = set()
    result: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result
