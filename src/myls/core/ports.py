"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from collections.abc import Iterator
    from concurrent.futures import Future
    from contextlib import AbstractContextManager

    from myls.core.models import PathStat


@runtime_checkable
class FilesystemPort(Protocol):
    """Read-only access to the local filesystem."""

    def probe_directory(self, path: str) -> bool:
        """Check whether path can be opened as a directory.

        The handle is closed before returning; nothing is retained.
        """
        ...

    def lstat(self, path: str) -> PathStat:
        """Get link-unaware metadata for path.

        Raises:
            PathAccessError: If the path cannot be stat'ed.
        """
        ...

    def open_directory(self, path: str) -> AbstractContextManager[Iterator[str]]:
        """Open a directory for listing its immediate children.

        Returns:
            A context manager yielding an iterator of child names. The
            directory handle is released when the context exits, including
            when iteration stops early.

        Raises:
            PathAccessError: If the directory cannot be opened.
        """
        ...


@runtime_checkable
class DiagnosticReporter(Protocol):
    """Receives user-facing diagnostic messages.

    The core reports recoverable conditions (inaccessible operands,
    unreadable directories, capacity overflow) through this protocol
    without depending on any output mechanism.
    """

    def report(self, message: str) -> None:
        """Deliver one diagnostic line."""
        ...


class NullDiagnosticReporter:
    """A DiagnosticReporter that discards every message.

    Used as the default when no reporter is injected.
    """

    def report(self, message: str) -> None:
        """Do nothing."""
        _ = message  # Unused but required by protocol


class BufferedDiagnosticReporter:
    """A DiagnosticReporter that keeps messages in arrival order.

    Lets each directory's diagnostics be collected while it is read and
    printed later alongside that directory's section.
    """

    def __init__(self) -> None:
        self.messages: list[str] = []

    def report(self, message: str) -> None:
        """Record the message."""
        self.messages.append(message)

    def replay(self, reporter: DiagnosticReporter) -> None:
        """Forward every recorded message to another reporter, in order."""
        for message in self.messages:
            reporter.report(message)


@runtime_checkable
class ExecutorPort(Protocol):
    """Executor for parallel task execution.

    Abstracts over concurrent.futures executors to allow dependency injection
    and testing. The core domain uses this protocol instead of directly
    importing ThreadPoolExecutor, keeping concurrency at the edges.
    """

    def submit(
        self, fn: Callable[..., object], *args: object, **kwargs: object
    ) -> Future[object]:  # type: ignore[name-defined, unused-ignore]
        """Submit a function for execution.

        Args:
            fn: Function to execute.
            *args: Positional arguments to pass to fn.
            **kwargs: Keyword arguments to pass to fn.

        Returns:
            Future representing the pending result.
        """
        ...

    def __enter__(self) -> ExecutorPort:
        """Enter context manager."""
        ...

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        """Exit context manager."""
        ...
