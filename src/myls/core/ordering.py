"""Ordering policies for operands and directory entries.

Two total orders are supported. Lexicographic order compares names byte-wise
(through their filesystem encoding, so undecodable names still order by their
raw bytes). Time order puts the most recently modified entry first and falls
back to nanoseconds, then to the name, so equal timestamps still produce one
deterministic result.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Iterable

    from myls.core.models import Entry, EntryCollection


def name_key(name: str) -> bytes:
    """Byte-wise sort key for a name or operand."""
    return os.fsencode(name)


def lexicographic_key(entry: Entry) -> bytes:
    """Sort key ordering entries by name, byte-wise ascending."""
    return name_key(entry.name)


def time_key(entry: Entry) -> tuple[int, int, bytes]:
    """Sort key ordering entries newest first.

    Seconds descending, then nanoseconds descending, then name ascending.
    """
    return (-entry.mtime_sec, -entry.mtime_nsec, name_key(entry.name))


def sort_names(names: Iterable[str]) -> list[str]:
    """Return operand strings in lexicographic order.

    Example:
        >>> sort_names(["b", "B", "a"])
        ['B', 'a', 'b']
    """
    return sorted(names, key=name_key)


def sort_collection(collection: EntryCollection, by_time: bool = False) -> None:
    """Sort a collection in place.

    Only the retained entries are touched; anything refused for lack of
    capacity was never stored.

    Args:
        collection: The entries to order.
        by_time: Use time-descending order instead of lexicographic order.
    """
    key = time_key if by_time else lexicographic_key
    collection.entries.sort(key=key)
