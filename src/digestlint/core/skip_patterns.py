"""
Skip-pattern matching for digest checks.

Skip patterns are regular expressions matched against bare filenames to
exempt them from digest verification. A pattern that would match one of the
infrastructure names in FORBIDDEN_NAMES is rejected, so that an overly broad
pattern such as ``.*`` cannot silently disable checking altogether.
"""

import logging
import os
import re
from collections.abc import Iterable
from pathlib import Path

from digestlint.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Names that no skip pattern is allowed to match
FORBIDDEN_NAMES: tuple[str, ...] = (
    "",
    "''",
    ".",
    "..",
    ".DS_Store",
    ".htaccess",
    '""',
    "favicon.ico",
    "index.html",
    "robots.txt",
)


def _validate_pattern(pattern: re.Pattern[str]) -> None:
    """Raise ConfigurationError if the pattern matches a forbidden name."""
    for name in FORBIDDEN_NAMES:
        if pattern.fullmatch(name):
            raise ConfigurationError(
                f"pattern {pattern.pattern!r} is invalid because it matched {name!r}"
            )


class SkipMatcher:
    """
    Immutable set of compiled skip patterns.

    Each pattern must match an entire filename. An empty matcher matches
    nothing.
    """

    __slots__ = ("_patterns",)

    def __init__(self, patterns: Iterable[re.Pattern[str]] = ()):
        self._patterns: tuple[re.Pattern[str], ...] = tuple(patterns)

    @classmethod
    def from_patterns(cls, patterns: Iterable[str] | None) -> "SkipMatcher":
        """
        Compile and validate raw pattern strings.

        Args:
            patterns: Regular expressions, in the order they should be tried

        Returns:
            SkipMatcher holding every compiled pattern

        Raises:
            ConfigurationError: If a pattern fails to compile or matches a
                forbidden name
        """
        compiled = []
        for expr in patterns or ():
            try:
                pattern = re.compile(expr)
            except re.error as e:
                raise ConfigurationError(f"pattern {expr!r} is not a valid regular expression: {e}") from e
            _validate_pattern(pattern)
            compiled.append(pattern)

        if compiled:
            logger.debug(f"Compiled {len(compiled)} skip patterns")
        return cls(compiled)

    def match_string(self, name: str | Path) -> bool:
        """Return True if the base name of ``name`` matches any pattern."""
        base_name = os.path.basename(os.fspath(name))
        return any(p.fullmatch(base_name) for p in self._patterns)

    @property
    def patterns(self) -> tuple[str, ...]:
        """Return the source strings of the compiled patterns."""
        return tuple(p.pattern for p in self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __bool__(self) -> bool:
        return bool(self._patterns)

    def __repr__(self) -> str:
        return f"SkipMatcher({list(self.patterns)!r})"
