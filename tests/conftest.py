"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import TYPE_CHECKING

import pytest

from myls.core.exceptions import PathAccessError
from myls.core.models import PathStat


if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, ordering, and services")
    config.addinivalue_line("markers", "filesystem: Filesystem and executor adapters")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


class FakeFilesystem:
    """In-memory FilesystemPort for deterministic core tests.

    Directories keep their children in insertion order, which stands in for
    the filesystem's enumeration order. Paths use ``/`` separators.
    """

    def __init__(self) -> None:
        self.children: dict[str, list[str]] = {}
        self.stats: dict[str, PathStat] = {}
        self.unreadable: set[str] = set()
        self.open_handles = 0
        self.opened: list[str] = []

    def _attach(self, path: str) -> None:
        if "/" in path:
            parent, name = path.rsplit("/", 1)
            if parent in self.children:
                self.children[parent].append(name)

    def add_dir(self, path: str, sec: int = 0, nsec: int = 0) -> FakeFilesystem:
        self.children[path] = []
        self.stats[path] = PathStat(mtime_sec=sec, mtime_nsec=nsec, is_directory=True)
        self._attach(path)
        return self

    def add_file(self, path: str, sec: int = 0, nsec: int = 0) -> FakeFilesystem:
        self.stats[path] = PathStat(mtime_sec=sec, mtime_nsec=nsec, is_directory=False)
        self._attach(path)
        return self

    def add_vanished(self, path: str) -> FakeFilesystem:
        """List a child that disappears before it can be stat'ed."""
        self._attach(path)
        return self

    def probe_directory(self, path: str) -> bool:
        return path in self.children and path not in self.unreadable

    def lstat(self, path: str) -> PathStat:
        if path not in self.stats:
            raise PathAccessError(f"Cannot stat: {path}", path=path)
        return self.stats[path]

    def open_directory(self, path: str):  # noqa: ANN201
        if not self.probe_directory(path):
            raise PathAccessError(f"Cannot open directory: {path}", path=path)
        self.open_handles += 1
        self.opened.append(path)
        return self._names(path)

    @contextmanager
    def _names(self, path: str) -> Iterator[Iterator[str]]:
        try:
            yield iter(list(self.children[path]))
        finally:
            self.open_handles -= 1


@pytest.fixture
def fake_filesystem() -> FakeFilesystem:
    """Reusable in-memory filesystem adapter for testing.

    Implements FilesystemPort without touching the disk.
    """
    return FakeFilesystem()


@pytest.fixture
def set_mtime():
    """Set a path's modification time (seconds plus nanoseconds), link-unaware."""

    def _set(path: Path, sec: int, nsec: int = 0) -> None:
        ns = sec * 1_000_000_000 + nsec
        os.utime(path, ns=(ns, ns), follow_symlinks=False)

    return _set


@pytest.fixture
def reset_logging() -> Iterator[None]:
    """Restore root logger state after tests that configure logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
