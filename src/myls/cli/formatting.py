"""Output helpers for the CLI."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import typer
from rich.text import Text

from myls.core.formatting import entry_to_color, iter_output


if TYPE_CHECKING:
    from rich.console import Console

    from myls.core.models import Entry, Listing
    from myls.core.ports import DiagnosticReporter


class EchoDiagnosticReporter:
    """DiagnosticReporter writing each message to stderr."""

    def report(self, message: str) -> None:
        """Echo the message to stderr as filesystem-encoded bytes."""
        # All diagnostics share stderr; stdout carries only the listing
        typer.echo(os.fsencode(message), err=True)


def _format_entry_with_color(entry: Entry) -> Text:
    """Format an entry name with color coding.

    Returns:
        Rich Text styled per entry_to_color; unstyled for plain files.
    """
    color = entry_to_color(entry)
    return Text(entry.name, style=color) if color else Text(entry.name)


def print_plain(listing: Listing, reporter: DiagnosticReporter) -> None:
    """Print a listing as plain text; diagnostics go to the reporter.

    Lines are written as filesystem-encoded bytes so names that are not valid
    UTF-8 print exactly as stored.
    """
    for line in iter_output(listing):
        if line.diagnostic:
            reporter.report(line.text)
        else:
            typer.echo(os.fsencode(line.text))


def print_styled(
    listing: Listing, console: Console, reporter: DiagnosticReporter
) -> None:
    """Print a listing through a Rich console with directory entries highlighted.

    Each line is rendered into a capture and written as filesystem-encoded
    bytes, so the text matches print_plain byte for byte apart from the
    ANSI styling.
    """
    for line in iter_output(listing):
        if line.diagnostic:
            reporter.report(line.text)
            continue
        if line.entry is not None:
            text = _format_entry_with_color(line.entry)
        else:
            text = Text(line.text)
        with console.capture() as capture:
            console.print(text, soft_wrap=True)
        typer.echo(os.fsencode(capture.get()), nl=False)
