"""Core domain module for myls.

This module contains pure Python domain models, ordering policies and port
definitions. Filesystem access goes through FilesystemPort, so the core can
be tested against an in-memory fake.
"""

from myls.core.classifier import classify
from myls.core.enumerator import enumerate_directory
from myls.core.models import (
    ClassifiedOperands,
    DirectorySection,
    Entry,
    EntryCollection,
    Listing,
    ListingOptions,
    PathStat,
)
from myls.core.ordering import sort_collection, sort_names
from myls.core.ports import DiagnosticReporter, ExecutorPort, FilesystemPort


__all__ = [
    "ClassifiedOperands",
    "DiagnosticReporter",
    "DirectorySection",
    "Entry",
    "EntryCollection",
    "ExecutorPort",
    "FilesystemPort",
    "Listing",
    "ListingOptions",
    "PathStat",
    "classify",
    "enumerate_directory",
    "sort_collection",
    "sort_names",
]
