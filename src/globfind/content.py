"""Line-by-line content matching."""

from __future__ import annotations

from collections.abc import Sequence

from globfind.filter import Matcher, matches_any


def scan_content(path: str, matchers: Sequence[Matcher]) -> bool:
    """Return whether any line of *path* is fully matched by a matcher.

    Lines end at ``\\n`` and are compared without their ``\\n`` or
    ``\\r\\n`` terminator. Matching is anchored, so
    ``TODO`` only matches a line that is exactly ``TODO`` while ``*TODO*``
    matches any line containing it.

    Args:
        path: File to read as UTF-8 text.
        matchers: Content filters. An empty sequence never matches.

    Returns:
        bool: ``True`` on the first matching line.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the file is not valid UTF-8 text.
    """
    with open(path, encoding="utf-8", newline="\n") as fh:
        for line in fh:
            if matches_any(matchers, _strip_terminator(line)):
                return True
    return False


def _strip_terminator(line: str) -> str:
    # Only "\n" ends a line; a lone "\r" stays part of the content.
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line
