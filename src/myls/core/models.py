"""Core domain models for myls.

These models are pure Python dataclasses with no I/O dependencies.
They represent the classified operands, the entries discovered in a
directory, and the assembled listing of one invocation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from myls.config import DEFAULT_MAX_ENTRIES


if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class PathStat:
    """Link-unaware metadata for a single path.

    Attributes:
        mtime_sec: Last modification time, whole epoch seconds.
        mtime_nsec: Sub-second component of the modification time.
        is_directory: Whether the path itself (not a link target) is a directory.
    """

    mtime_sec: int
    mtime_nsec: int
    is_directory: bool


@dataclass(frozen=True, slots=True)
class Entry:
    """One child discovered while enumerating a directory.

    Attributes:
        name: Base name of the entry (not the full path).
        mtime_sec: Last modification time, whole epoch seconds.
        mtime_nsec: Sub-second component, used only for tie-breaking.
        is_directory: Whether the entry is a directory. Symbolic links
            report the link itself, never the target.

    Example:
        >>> entry = Entry(name="notes.txt", mtime_sec=1700000000, mtime_nsec=0)
        >>> entry.is_hidden
        False
    """

    name: str
    mtime_sec: int
    mtime_nsec: int
    is_directory: bool = False

    def __post_init__(self) -> None:
        """Validate entry fields after initialization."""
        if not self.name:
            raise ValueError("Entry name cannot be empty")
        if not 0 <= self.mtime_nsec < 1_000_000_000:
            raise ValueError("Entry mtime_nsec must be within [0, 1e9)")

    @classmethod
    def from_stat(cls, name: str, stat: PathStat) -> Entry:
        """Build an entry from a name and its link-unaware metadata."""
        return cls(
            name=name,
            mtime_sec=stat.mtime_sec,
            mtime_nsec=stat.mtime_nsec,
            is_directory=stat.is_directory,
        )

    @property
    def is_hidden(self) -> bool:
        """Whether the name starts with the hidden-entry marker."""
        return self.name.startswith(".")


@dataclass(slots=True)
class EntryCollection:
    """Bounded, ordered sequence of entries read from one directory.

    The collection never holds more than ``capacity`` entries. Entries are
    kept in enumeration order until sorted.

    Attributes:
        path: Directory the entries were read from.
        capacity: Maximum number of entries retained.
        entries: The retained entries.
        overflowed: True once an entry was refused for lack of capacity.
    """

    path: str
    capacity: int = DEFAULT_MAX_ENTRIES
    entries: list[Entry] = field(default_factory=list)
    overflowed: bool = False

    def __post_init__(self) -> None:
        """Validate capacity and any pre-populated entries."""
        if self.capacity < 1:
            raise ValueError("EntryCollection capacity must be positive")
        if len(self.entries) > self.capacity:
            raise ValueError("EntryCollection holds more entries than its capacity")

    @property
    def count(self) -> int:
        """Number of retained entries."""
        return len(self.entries)

    @property
    def is_full(self) -> bool:
        """Whether no further entries can be retained."""
        return len(self.entries) >= self.capacity

    def add(self, entry: Entry) -> bool:
        """Append an entry if capacity remains.

        Returns:
            True if the entry was retained, False if it was refused. A refusal
            marks the collection as overflowed.
        """
        if self.is_full:
            self.overflowed = True
            return False
        self.entries.append(entry)
        return True

    @property
    def names(self) -> list[str]:
        """Entry names in current order."""
        return [entry.name for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)


@dataclass(slots=True)
class ClassifiedOperands:
    """Operands partitioned by what the filesystem says they are.

    Every operand lands in exactly one of ``files``, ``directories`` or
    ``dropped``.

    Attributes:
        files: Accessible non-directory operands, in input order.
        directories: Accessible directory operands, in input order.
        dropped: Operands that could be neither opened nor stat'ed.
    """

    files: list[str] = field(default_factory=list)
    directories: list[str] = field(default_factory=list)
    dropped: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Whether no operand was accepted as a file or directory."""
        return not self.files and not self.directories


@dataclass(frozen=True, slots=True)
class ListingOptions:
    """Display flags for one invocation.

    Attributes:
        show_all: Include hidden entries (``-a``).
        sort_time: Order entries newest first (``-t``).
    """

    show_all: bool = False
    sort_time: bool = False


@dataclass(slots=True)
class DirectorySection:
    """The sorted contents of one directory operand.

    Attributes:
        path: The directory operand as given.
        entries: Sorted entries read from the directory.
        diagnostics: Messages produced while reading this directory.
    """

    path: str
    entries: EntryCollection
    diagnostics: list[str] = field(default_factory=list)


@dataclass(slots=True)
class Listing:
    """Everything one invocation prints, in print order.

    Attributes:
        files: Sorted non-directory operands.
        sections: One section per directory operand, sorted by path.
    """

    files: list[str] = field(default_factory=list)
    sections: list[DirectorySection] = field(default_factory=list)

    @property
    def show_headers(self) -> bool:
        """Directory headers are printed only when several directories are listed."""
        return len(self.sections) > 1
