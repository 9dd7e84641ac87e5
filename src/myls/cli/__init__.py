"""CLI for myls."""

from myls.cli.main import app, main


__all__ = ["app", "main"]
