"""Core search engine: depth-first walk with name and content selection."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from globfind.content import scan_content
from globfind.filter import Matcher, matches_any
from globfind.gitignore import load_gitignore_rules

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Options controlling file selection, fixed for a whole run.

    Attributes:
        exclude: Optional name exclusion matcher.
        filters: Include matchers, applied to names and (with
            ``content_search``) to file lines. Empty means no name
            restriction.
        include_hidden: Whether file names starting with ``.`` may match
            by name.
        content_search: Whether files may also be selected by content.
        respect_gitignore: Whether to skip entries ignored by the root's
            ``.gitignore``.
    """

    exclude: Matcher | None = None
    filters: tuple[Matcher, ...] = ()
    include_hidden: bool = False
    content_search: bool = False
    respect_gitignore: bool = False


@dataclass(slots=True)
class TraversalResult:
    """Accumulated outcome of one or more directory walks.

    Attributes:
        files: Selected file paths in depth-first enumeration order.
        permission_denied: Directories that could not be stat'ed or listed
            because access was denied.
        other_error: Whether any other error was recorded.
        errors: One message per recorded error.
        directories_visited: Number of directories a visit was started for.
    """

    files: list[str] = field(default_factory=list)
    permission_denied: list[str] = field(default_factory=list)
    other_error: bool = False
    errors: list[str] = field(default_factory=list)
    directories_visited: int = 0

    @property
    def error_text(self) -> str:
        """Newline-joined error messages."""
        return "\n".join(self.errors)

    def add_error(self, message: str) -> None:
        self.other_error = True
        self.errors.append(message)

    def extend(self, other: TraversalResult) -> None:
        """Append *other* after everything accumulated so far."""
        self.files.extend(other.files)
        self.permission_denied.extend(other.permission_denied)
        self.other_error = self.other_error or other.other_error
        self.errors.extend(other.errors)
        self.directories_visited += other.directories_visited


def _reason(exc: Exception) -> str:
    return getattr(exc, "strerror", None) or str(exc)


def matches_name(name: str, config: SearchConfig) -> bool:
    """Apply the hidden, include and exclude rules to a file name.

    Args:
        name: Base name of the file.
        config: Active search configuration.

    Returns:
        bool: ``True`` when the file is selected by its name.
    """
    if not config.include_hidden and name.startswith("."):
        return False
    if config.filters and not matches_any(config.filters, name):
        return False
    return config.exclude is None or not config.exclude.matches(name)


def _matches_content(path: str, config: SearchConfig, result: TraversalResult) -> bool:
    if not config.content_search:
        return False
    try:
        return scan_content(path, config.filters)
    except (OSError, UnicodeDecodeError) as exc:
        result.add_error(f"Error reading file {path}: {_reason(exc)}")
        return False


def _read_directory(directory: str, result: TraversalResult) -> list[os.DirEntry[str]] | None:
    """Start a directory visit and read its whole listing.

    The listing is closed before returning, so a walk holds at most one
    directory handle at a time. An error part-way through the listing is
    recorded and the entries read before it are kept.

    Returns:
        The entries in listing order, or ``None`` when the directory cannot
        be listed.
    """
    result.directories_visited += 1
    try:
        st = os.stat(directory)
    except PermissionError:
        logger.debug("Permission denied: %s", directory)
        result.permission_denied.append(directory)
        return None
    except OSError as exc:
        result.add_error(f"Error accessing {directory}: {_reason(exc)}")
        return None

    if not stat.S_ISDIR(st.st_mode):
        result.add_error(f"Error: {directory} is not a directory")
        return None

    try:
        listing = os.scandir(directory)
    except PermissionError:
        logger.debug("Permission denied: %s", directory)
        result.permission_denied.append(directory)
        return None
    except OSError as exc:
        result.add_error(f"Error reading directory {directory}: {_reason(exc)}")
        return None

    entries: list[os.DirEntry[str]] = []
    with listing:
        try:
            for dir_entry in listing:
                entries.append(dir_entry)
        except OSError as exc:
            result.add_error(f"Error accessing entry: {_reason(exc)}")
    return entries


def walk(directory: str, config: SearchConfig) -> TraversalResult:
    """Search *directory* and everything below it.

    Entries are visited in the order the filesystem lists them. A
    subdirectory is searched as soon as it is listed, so its matches
    appear right after the matches of the entries listed before it.
    Errors are recorded in the result and never abort the walk.

    Note that exclusion and the hidden-file rule only restrict name
    matching: with ``content_search`` a file whose content matches is
    selected even if its name is excluded or hidden.

    Args:
        directory: Root directory to search.
        config: Search configuration.

    Returns:
        TraversalResult: Everything found below *directory*.
    """
    result = TraversalResult()
    entries = _read_directory(directory, result)
    if entries is None:
        return result

    rules = load_gitignore_rules(directory) if config.respect_gitignore else None

    # Remaining entries per directory level; the top one is being processed.
    stack: list[Iterator[os.DirEntry[str]]] = [iter(entries)]

    while stack:
        dir_entry = next(stack[-1], None)
        if dir_entry is None:
            stack.pop()
            continue

        try:
            is_dir = dir_entry.is_dir()
        except OSError as exc:
            result.add_error(f"Error accessing entry: {dir_entry.path}: {_reason(exc)}")
            continue

        if rules is not None and rules.is_ignored(dir_entry.path, is_dir):
            logger.debug("Ignored by .gitignore: %s", dir_entry.path)
            continue

        if is_dir:
            child = _read_directory(dir_entry.path, result)
            if child is not None:
                stack.append(iter(child))
            continue

        name_ok = matches_name(dir_entry.name, config)
        content_ok = _matches_content(dir_entry.path, config, result)
        if name_ok or content_ok:
            result.files.append(dir_entry.path)

    return result


def search(roots: Iterable[str], config: SearchConfig) -> TraversalResult:
    """Walk each root in order and concatenate the results.

    Args:
        roots: Root directories. Overlapping roots report shared files
            once per root.
        config: Search configuration shared by every walk.

    Returns:
        TraversalResult: Combined result.
    """
    combined = TraversalResult()
    for root in roots:
        logger.debug("Searching %s", root)
        combined.extend(walk(root, config))
    return combined
