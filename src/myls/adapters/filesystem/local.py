"""Local filesystem adapter for directory probing and listing."""

from __future__ import annotations

import os
import stat
from contextlib import contextmanager
from typing import TYPE_CHECKING

from myls.core.exceptions import PathAccessError
from myls.core.models import PathStat


if TYPE_CHECKING:
    from collections.abc import Iterator
    from contextlib import AbstractContextManager


_NANOS_PER_SECOND = 1_000_000_000


@contextmanager
def _child_names(iterator: Iterator[os.DirEntry[str]]) -> Iterator[Iterator[str]]:
    """Yield child names from an open scandir iterator, closing it on exit."""
    with iterator:  # type: ignore[attr-defined]
        yield (entry.name for entry in iterator)


class LocalFilesystem:
    """Filesystem adapter backed by os.scandir and os.lstat.

    Implements FilesystemPort. Symbolic links are never followed when
    reading metadata.
    """

    def probe_directory(self, path: str) -> bool:
        """Check whether path opens as a directory.

        Args:
            path: Path to probe.

        Returns:
            True if the directory could be opened. The handle is closed
            immediately.
        """
        try:
            with os.scandir(path):
                return True
        except OSError:
            return False

    def lstat(self, path: str) -> PathStat:
        """Get link-unaware metadata for path.

        Args:
            path: Path to stat (links are not followed).

        Returns:
            PathStat with split modification time and directory flag.

        Raises:
            PathAccessError: If the path does not exist or cannot be stat'ed.
        """
        try:
            st = os.lstat(path)
        except OSError as e:
            raise PathAccessError(
                f"Cannot stat: {path}",
                path=path,
                cause=e,
            ) from e

        mtime_sec, mtime_nsec = divmod(st.st_mtime_ns, _NANOS_PER_SECOND)
        return PathStat(
            mtime_sec=mtime_sec,
            mtime_nsec=mtime_nsec,
            is_directory=stat.S_ISDIR(st.st_mode),
        )

    def open_directory(self, path: str) -> AbstractContextManager[Iterator[str]]:
        """Open a directory and return a context manager over its child names.

        The directory is opened eagerly so open failures surface here rather
        than on entering the context.

        Args:
            path: Directory to open.

        Returns:
            Context manager yielding an iterator of child names; the handle
            is released on exit.

        Raises:
            PathAccessError: If the directory cannot be opened.
        """
        try:
            iterator = os.scandir(path)
        except OSError as e:
            raise PathAccessError(
                f"Cannot open directory: {path}",
                path=path,
                cause=e,
            ) from e
        return _child_names(iterator)
