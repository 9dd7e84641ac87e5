"""Core domain services for myls."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from myls.config import DEFAULT_MAX_ENTRIES, validate_max_entries
from myls.core.classifier import classify
from myls.core.enumerator import enumerate_directory
from myls.core.models import DirectorySection, Listing, ListingOptions
from myls.core.ordering import sort_collection, sort_names
from myls.core.ports import BufferedDiagnosticReporter, NullDiagnosticReporter


if TYPE_CHECKING:
    from collections.abc import Iterable

    from myls.core.models import ClassifiedOperands, EntryCollection
    from myls.core.ports import DiagnosticReporter, ExecutorPort, FilesystemPort


logger = logging.getLogger(__name__)


class Lister:
    """Orchestrates classification, enumeration and ordering for one run."""

    def __init__(
        self,
        filesystem: FilesystemPort,
        reporter: DiagnosticReporter | None = None,
        executor: ExecutorPort | None = None,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ) -> None:
        self._filesystem = filesystem
        self._reporter = reporter if reporter is not None else NullDiagnosticReporter()
        self._executor = executor
        self._max_entries = validate_max_entries(max_entries)

    @classmethod
    def from_local(
        cls,
        reporter: DiagnosticReporter | None = None,
        workers: int = 1,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ) -> Lister:
        """Create a Lister wired to the local filesystem.

        Args:
            reporter: Receives user-facing diagnostics.
            workers: Directories enumerated in parallel. 1 reads them
                sequentially in the calling thread.
            max_entries: Capacity ceiling per directory.

        A thread pool is shut down when list() returns, so a Lister built
        with workers > 1 serves a single listing.

        Returns:
            Lister with LocalFilesystem and an executor matching workers.
        """
        from myls.adapters.executor import (
            SynchronousExecutor,
            ThreadPoolExecutorAdapter,
        )
        from myls.adapters.filesystem import LocalFilesystem
        from myls.config import validate_workers

        workers = validate_workers(workers)
        executor: ExecutorPort
        if workers == 1:
            executor = SynchronousExecutor()
        else:
            executor = ThreadPoolExecutorAdapter(max_workers=workers)

        return cls(
            filesystem=LocalFilesystem(),
            reporter=reporter,
            executor=executor,
            max_entries=max_entries,
        )

    @property
    def max_entries(self) -> int:
        """Capacity ceiling applied to every directory."""
        return self._max_entries

    def classify(self, operands: Iterable[str]) -> ClassifiedOperands:
        """Partition operands, reporting the inaccessible ones."""
        return classify(operands, self._filesystem, self._reporter)

    def enumerate(
        self,
        path: str,
        include_hidden: bool = False,
        reporter: DiagnosticReporter | None = None,
    ) -> EntryCollection:
        """Read one directory into an unsorted EntryCollection.

        Args:
            path: Directory to read.
            include_hidden: Include entries whose names begin with ``.``.
            reporter: Overrides the Lister's reporter for this directory.
        """
        return enumerate_directory(
            path,
            include_hidden,
            self._filesystem,
            reporter if reporter is not None else self._reporter,
            self._max_entries,
        )

    def _read_section(self, path: str, options: ListingOptions) -> DirectorySection:
        buffer = BufferedDiagnosticReporter()
        collection = self.enumerate(path, options.show_all, reporter=buffer)
        sort_collection(collection, by_time=options.sort_time)
        return DirectorySection(
            path=path, entries=collection, diagnostics=buffer.messages
        )

    def list(
        self,
        operands: Iterable[str],
        options: ListingOptions | None = None,
    ) -> Listing:
        """Build the complete listing for one invocation.

        Operand lists are always ordered lexicographically; directory entries
        follow options.sort_time. Classification diagnostics go to the
        reporter immediately. Diagnostics raised while reading a directory
        are kept on its section, so the caller prints them in section order
        even when directories were read in parallel.

        Args:
            operands: Command-line tokens; flag tokens are ignored.
            options: Display flags. Defaults to no flags.

        Returns:
            Listing with sorted files and one section per directory.
        """
        if options is None:
            options = ListingOptions()

        classified = self.classify(operands)
        files = sort_names(classified.files)
        directories = sort_names(classified.directories)

        # Sequential execution when no executor provided
        if self._executor is None:
            sections = [self._read_section(path, options) for path in directories]
            return Listing(files=files, sections=sections)

        logger.debug("Reading %d directories via %s", len(directories), self._executor)
        sections = []
        executor = self._executor
        with executor:
            futures = [
                executor.submit(self._read_section, path, options)
                for path in directories
            ]
            for future in futures:
                section = future.result()
                assert isinstance(section, DirectorySection)
                sections.append(section)

        return Listing(files=files, sections=sections)
