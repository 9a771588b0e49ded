"""Gitignore integration: skip entries ignored by a root's .gitignore."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from pathspec import GitIgnoreSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GitignoreRules:
    """Patterns from a search root's ``.gitignore``.

    Attributes:
        root: Search root the patterns are relative to.
        spec: Compiled gitignore spec.
    """

    root: str
    spec: GitIgnoreSpec

    def is_ignored(self, path: str, is_dir: bool) -> bool:
        """Return whether *path* (below ``root``) is ignored.

        Args:
            path: Entry path as produced by the traversal.
            is_dir: Whether the entry is a directory.

        Returns:
            bool: ``True`` when the spec matches the root-relative path.
        """
        rel = os.path.relpath(path, self.root).replace(os.sep, "/")
        if is_dir:
            rel += "/"
        return self.spec.match_file(rel)


def load_gitignore_rules(root: str) -> GitignoreRules | None:
    """Load ``.gitignore`` patterns from *root*.

    Args:
        root: Directory containing the ``.gitignore`` file.

    Returns:
        The loaded rules when a ``.gitignore`` exists and is readable,
        otherwise ``None``.
    """
    gitignore_path = os.path.join(root, ".gitignore")
    try:
        with open(gitignore_path, encoding="utf-8") as fh:
            lines = fh.read().splitlines()
    except (OSError, UnicodeDecodeError):
        logger.debug("Cannot read .gitignore: %s", gitignore_path)
        return None
    return GitignoreRules(root=root, spec=GitIgnoreSpec.from_lines(lines))
