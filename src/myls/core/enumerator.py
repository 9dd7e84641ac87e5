"""Directory enumeration.

Reads the immediate children of one directory into a bounded
EntryCollection. No ordering is applied here; entries keep the order in
which the filesystem returned them.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from myls.config import DEFAULT_MAX_ENTRIES
from myls.core.exceptions import PathAccessError
from myls.core.models import Entry, EntryCollection
from myls.core.ports import NullDiagnosticReporter


if TYPE_CHECKING:
    from myls.core.ports import DiagnosticReporter, FilesystemPort


logger = logging.getLogger(__name__)


def enumerate_directory(
    path: str,
    include_hidden: bool,
    filesystem: FilesystemPort,
    reporter: DiagnosticReporter | None = None,
    capacity: int = DEFAULT_MAX_ENTRIES,
) -> EntryCollection:
    """Collect metadata for the immediate children of a directory.

    Behavior:
        - A directory that cannot be opened is reported and yields an empty
          collection.
        - Names starting with ``.`` are skipped unless include_hidden is set.
        - Children whose metadata cannot be read are skipped silently; the
          directory may be changing underneath us.
        - Once capacity is exhausted, the next entry that does not fit stops
          enumeration and a single overflow diagnostic is reported.

    Args:
        path: Directory to read.
        include_hidden: Include entries whose names begin with ``.``.
        filesystem: Filesystem adapter used for listing and stat.
        reporter: Receives diagnostics for this directory.
        capacity: Maximum number of entries retained.

    Returns:
        EntryCollection in raw enumeration order.
    """
    if reporter is None:
        reporter = NullDiagnosticReporter()

    collection = EntryCollection(path=path, capacity=capacity)

    try:
        listing = filesystem.open_directory(path)
    except PathAccessError as e:
        logger.debug("Cannot open %r: %s", path, e.cause or e)
        reporter.report(f"myls: cannot access {path}")
        return collection

    with listing as names:
        for name in names:
            if not include_hidden and name.startswith("."):
                continue

            try:
                stat = filesystem.lstat(os.path.join(path, name))
            except PathAccessError:
                logger.debug("Skipping %r in %r: metadata unavailable", name, path)
                continue

            if not collection.add(Entry.from_stat(name, stat)):
                logger.debug("Capacity %d reached in %r", capacity, path)
                reporter.report(
                    f"myls: too many files in '{path}' (max {capacity}). "
                    "Some entries skipped"
                )
                break

    return collection
