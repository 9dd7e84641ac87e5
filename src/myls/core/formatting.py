"""Formatting utilities for domain logic.

A listing is flattened into OutputLine records in print order. Plain text
output, coloured output and tests all consume the same stream, so the layout
rules live in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Iterator

    from myls.core.models import Entry, Listing


@dataclass(frozen=True, slots=True)
class OutputLine:
    """One line of output.

    Attributes:
        text: Line content without the trailing newline.
        entry: The entry this line names, if it is an entry line.
        diagnostic: True for diagnostic messages (written to stderr).
    """

    text: str
    entry: Entry | None = None
    diagnostic: bool = False


def entry_to_color(entry: Entry) -> str:
    """Map an entry to a color name.

    Args:
        entry: The entry being printed.

    Returns:
        Color name string:
        - directory -> "bold blue"
        - anything else -> empty string
    """
    return "bold blue" if entry.is_directory else ""


def iter_output(listing: Listing) -> Iterator[OutputLine]:
    """Yield every output line of a listing, in print order.

    Layout:
        - Non-directory operands first, one per line.
        - One blank line between the file block and the directory block.
        - ``<path>:`` before each directory when more than one is listed.
        - A directory's diagnostics follow its header.
        - One blank line between directory sections, none after the last.
    """
    for name in listing.files:
        yield OutputLine(name)

    if listing.files and listing.sections:
        yield OutputLine("")

    last = len(listing.sections) - 1
    for i, section in enumerate(listing.sections):
        if listing.show_headers:
            yield OutputLine(f"{section.path}:")
        for message in section.diagnostics:
            yield OutputLine(message, diagnostic=True)
        for entry in section.entries:
            yield OutputLine(entry.name, entry=entry)
        if i < last:
            yield OutputLine("")


def render_lines(listing: Listing) -> list[str]:
    """Render a listing's standard output lines, without trailing newlines.

    Example:
        >>> from myls.core.models import DirectorySection, EntryCollection, Listing
        >>> listing = Listing(sections=[
        ...     DirectorySection("a", EntryCollection("a")),
        ...     DirectorySection("b", EntryCollection("b")),
        ... ])
        >>> render_lines(listing)
        ['a:', '', 'b:']
    """
    return [line.text for line in iter_output(listing) if not line.diagnostic]
