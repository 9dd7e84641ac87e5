"""myls - a small directory lister with deterministic ordering.

This library classifies path operands into files and directories, reads
each directory's immediate children with their modification times, and
orders everything either by name or newest first.

Example:
    >>> from myls import Lister, ListingOptions, render_lines
    >>> lister = Lister.from_local()
    >>> listing = lister.list(["src", "README.md"], ListingOptions(sort_time=True))
    >>> for line in render_lines(listing):
    ...     print(line)
"""

from myls.adapters.executor import SynchronousExecutor, ThreadPoolExecutorAdapter
from myls.adapters.filesystem import LocalFilesystem
from myls.config import DEFAULT_MAX_ENTRIES
from myls.core.classifier import classify
from myls.core.enumerator import enumerate_directory
from myls.core.exceptions import (
    ConfigurationError,
    InvalidOptionError,
    MylsError,
    PathAccessError,
)
from myls.core.formatting import render_lines
from myls.core.models import (
    ClassifiedOperands,
    DirectorySection,
    Entry,
    EntryCollection,
    Listing,
    ListingOptions,
    PathStat,
)
from myls.core.options import parse_options
from myls.core.ordering import sort_collection, sort_names
from myls.core.ports import (
    BufferedDiagnosticReporter,
    DiagnosticReporter,
    FilesystemPort,
    NullDiagnosticReporter,
)
from myls.core.services import Lister


__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MAX_ENTRIES",
    "BufferedDiagnosticReporter",
    "ClassifiedOperands",
    "ConfigurationError",
    "DiagnosticReporter",
    "DirectorySection",
    "Entry",
    "EntryCollection",
    "FilesystemPort",
    "InvalidOptionError",
    "Lister",
    "Listing",
    "ListingOptions",
    "LocalFilesystem",
    "MylsError",
    "NullDiagnosticReporter",
    "PathAccessError",
    "PathStat",
    "SynchronousExecutor",
    "ThreadPoolExecutorAdapter",
    "__version__",
    "classify",
    "enumerate_directory",
    "parse_options",
    "render_lines",
    "sort_collection",
    "sort_names",
]
