"""Shared fixtures for integration tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest


if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture
def project_tree(tmp_path: Path, set_mtime: Callable[..., None]) -> Path:
    """Create a small tree with files, hidden entries and known mtimes.

    Layout::

        fileA            mtime 50
        docs/            guide.md (300), .draft (400), notes.txt (100)
        src/             main.py (200), util.py (200, +5ns)
        empty/
    """
    (tmp_path / "fileA").write_text("a")
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "guide.md").write_text("guide")
    (docs / ".draft").write_text("draft")
    (docs / "notes.txt").write_text("notes")
    src = tmp_path / "src"
    src.mkdir()
    (src / "main.py").write_text("")
    (src / "util.py").write_text("")
    (tmp_path / "empty").mkdir()

    set_mtime(tmp_path / "fileA", 50)
    set_mtime(docs / "guide.md", 300)
    set_mtime(docs / ".draft", 400)
    set_mtime(docs / "notes.txt", 100)
    set_mtime(src / "main.py", 200)
    set_mtime(src / "util.py", 200, 5)
    return tmp_path
