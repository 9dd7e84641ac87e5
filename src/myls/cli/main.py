"""Command line for myls."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from myls.cli.formatting import EchoDiagnosticReporter, print_plain, print_styled
from myls.config import DEFAULT_MAX_ENTRIES, DEFAULT_WORKERS
from myls.core.exceptions import ConfigurationError, InvalidOptionError


app = typer.Typer(
    name="myls",
    help="List directory contents, files first, then each directory's entries.",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    """Send debug records to stderr through Rich when --verbose is given."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# Unknown short options are passed through to ARGS so the -a/-t scanner
# owns their semantics and the invalid-option message.
@app.command(context_settings={"ignore_unknown_options": True})
def myls(
    args: list[str] | None = typer.Argument(
        None,
        help="Paths to list, mixed with -a (show hidden) and -t (sort by time).",
        metavar="[-at] [PATH]...",
        show_default=False,
    ),
    max_entries: int = typer.Option(
        DEFAULT_MAX_ENTRIES,
        "--max-entries",
        help="Maximum number of entries kept per directory.",
    ),
    workers: int = typer.Option(
        DEFAULT_WORKERS,
        "--workers",
        help="Directories read in parallel (1 reads them sequentially).",
    ),
    color: bool = typer.Option(
        False,
        "--color",
        help="Highlight directory entries.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log filesystem probes to stderr.",
    ),
) -> None:
    """List files and directory contents."""
    from myls.core.options import parse_options
    from myls.core.services import Lister

    _configure_logging(verbose)
    tokens = args or []

    reporter = EchoDiagnosticReporter()
    try:
        options = parse_options(tokens)
    except InvalidOptionError as e:
        # Goes to stderr with the other diagnostics, then exit 1
        reporter.report(str(e))
        raise typer.Exit(1) from None

    try:
        lister = Lister.from_local(
            reporter=reporter, workers=workers, max_entries=max_entries
        )
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo(f"Hint: {e.recovery_hint}", err=True)
        raise typer.Exit(1) from None

    listing = lister.list(tokens, options)

    if color:
        # Force terminal output so styles survive pipes and test runners
        console = Console(force_terminal=True, color_system="standard", highlight=False)
        print_styled(listing, console, reporter)
    else:
        print_plain(listing, reporter)


def main() -> None:
    """Entry point for the CLI."""
    app()
