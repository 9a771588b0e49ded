"""Shared fixtures for globfind tests."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a standard test directory tree.

    Structure::

        root/
        ├── .env
        ├── .hidden/
        │   └── inner.txt
        ├── docs/
        │   ├── guide.md        (contains a line "TODO")
        │   └── todo-list.md
        ├── src/
        │   ├── app.py
        │   ├── notes.txt
        │   └── secret.txt
        └── readme.md           (contains a line "TODO")
    """
    (tmp_path / ".env").write_text("KEY=value\n")
    (tmp_path / ".hidden").mkdir()
    (tmp_path / ".hidden" / "inner.txt").write_text("inner\n")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "guide.md").write_text("# Guide\nTODO\n")
    (tmp_path / "docs" / "todo-list.md").write_text("- nothing yet\n")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "app.py").write_text("print('app')  # TODO tidy\n")
    (tmp_path / "src" / "notes.txt").write_text("notes\n")
    (tmp_path / "src" / "secret.txt").write_text("hunter2\n")
    (tmp_path / "readme.md").write_text("Readme\nTODO\n")
    return tmp_path


DenyFn = Callable[[Path], None]


@pytest.fixture
def deny_listing(monkeypatch: pytest.MonkeyPatch) -> DenyFn:
    """Make ``os.scandir`` fail with permission denied for chosen paths.

    Works regardless of the user running the tests (root ignores modes).

    Returns:
        A function registering a directory whose listing is denied.
    """
    denied: set[str] = set()
    real_scandir = os.scandir

    def fake_scandir(path: str = ".") -> Iterator[os.DirEntry[str]]:
        if os.path.abspath(path) in denied:
            raise PermissionError(13, "Permission denied", path)
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)

    def deny(path: Path) -> None:
        denied.add(os.path.abspath(path))

    return deny


def listing_order(directory: Path) -> list[str]:
    """Return every file below *directory* in filesystem listing order.

    Reference depth-first walk: subdirectories are expanded where they
    are listed.
    """
    found: list[str] = []
    for entry in os.scandir(directory):
        if entry.is_dir():
            found.extend(listing_order(Path(entry.path)))
        else:
            found.append(entry.path)
    return found
