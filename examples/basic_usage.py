"""Basic listing example.

This example shows the simplest usage pattern: build a Lister for the
local filesystem, list a few paths, and print the lines the CLI would
print. Inaccessible paths are reported through the reporter and skipped.
"""

from myls import Lister, ListingOptions, render_lines


class PrintReporter:
    """Print diagnostics as they arrive."""

    def report(self, message: str) -> None:
        print(message)


lister = Lister.from_local(reporter=PrintReporter())

# Files first, then each directory's entries by name
listing = lister.list(["src", "README.md", "tests"])
for line in render_lines(listing):
    print(line)

# Hidden entries included, newest first within each directory
listing = lister.list(["."], ListingOptions(show_all=True, sort_time=True))
for line in render_lines(listing):
    print(line)
