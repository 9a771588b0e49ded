"""Pattern compilation: ``*`` wildcard globs to anchored matchers."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Matcher:
    """A compiled wildcard pattern.

    Attributes:
        pattern: The original user pattern.
        regex: Compiled expression matched against the whole candidate.
    """

    pattern: str
    regex: re.Pattern[str]

    def matches(self, text: str) -> bool:
        """Return whether *text* is matched from start to end.

        Args:
            text: Candidate file name or content line.

        Returns:
            bool: ``True`` when the whole string matches.
        """
        return self.regex.fullmatch(text) is not None


def _translate(pattern: str) -> str:
    # Only ``*`` is special; there is no escape for a literal star.
    return ".*".join(re.escape(part) for part in pattern.split("*"))


def compile_pattern(pattern: str) -> Matcher | None:
    """Compile a wildcard pattern.

    Args:
        pattern: Raw pattern, ``*`` matching any sequence of characters.

    Returns:
        Matcher | None: The compiled matcher, or ``None`` when the pattern
        cannot be compiled.
    """
    try:
        regex = re.compile(_translate(pattern))
    except re.error as exc:
        logger.debug("Dropping pattern %r: %s", pattern, exc)
        return None
    return Matcher(pattern=pattern, regex=regex)


def compile_patterns(patterns: Iterable[str]) -> tuple[Matcher, ...]:
    """Compile patterns in order, dropping any that fail to compile.

    Args:
        patterns: Raw patterns.

    Returns:
        tuple[Matcher, ...]: Active matcher set.
    """
    compiled = (compile_pattern(p) for p in patterns)
    return tuple(m for m in compiled if m is not None)


def matches_any(matchers: Iterable[Matcher], text: str) -> bool:
    """Return whether any matcher matches *text* in full."""
    return any(m.matches(text) for m in matchers)
