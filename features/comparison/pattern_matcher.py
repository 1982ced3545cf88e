"""Deny-list pattern compilation and filtering."""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable

logger = logging.getLogger(__name__)

WILDCARD = "*"


@dataclass(frozen=True)
class DenyMatcher:
    """A compiled deny-list entry.

    Every "*" in the source pattern matches any run of characters; all other
    characters are literal. Matching is a substring search, so the pattern
    may hit anywhere inside a path.
    """

    pattern: str
    _regex: re.Pattern = field(repr=False, compare=False)

    def matches(self, path: str) -> bool:
        return self._regex.search(path) is not None


def compile_pattern(pattern: str) -> DenyMatcher:
    """Compile one deny-list entry. Never raises; "*" alone matches everything."""
    expression = ".*".join(re.escape(part) for part in pattern.split(WILDCARD))
    return DenyMatcher(pattern, re.compile(expression, re.DOTALL))


def compile_patterns(patterns: Iterable[str]) -> list[DenyMatcher]:
    """Compile a sequence of deny-list entries, keeping their order."""
    matchers = [compile_pattern(pattern) for pattern in patterns]
    logger.debug("Compiled %d deny patterns", len(matchers))
    return matchers


def filter_paths(paths: list[str], matchers: list[DenyMatcher]) -> list[str]:
    """Return the paths hit by at least one matcher, order and duplicates kept."""
    if not matchers:
        return []
    return [path for path in paths if any(m.matches(path) for m in matchers)]
