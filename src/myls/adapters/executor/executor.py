"""Executor adapters implementing ExecutorPort."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Callable


logger = logging.getLogger(__name__)


class SynchronousExecutor:
    """Runs each submitted directory read immediately in the calling thread.

    The default for ``--workers 1``; output is produced in submission order
    with no threads involved.
    """

    def submit(
        self,
        fn: Callable[..., object],
        *args: object,
        **kwargs: object,
    ) -> Future[object]:
        """Run fn now and wrap its outcome in an already-completed future.

        Exceptions are stored on the future and re-raised by result(), the
        same as a thread pool would.
        """
        future: Future[object] = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as e:
            future.set_exception(e)
        return future

    def __enter__(self) -> SynchronousExecutor:
        return self

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        return None

    def __repr__(self) -> str:
        return "SynchronousExecutor()"


class ThreadPoolExecutorAdapter:
    """Reads several directories concurrently on a thread pool.

    Directory reads share no state, so they can overlap freely; the caller
    collects results in submission order to keep output deterministic.
    """

    def __init__(self, max_workers: int | None = None) -> None:
        """Create the pool.

        Args:
            max_workers: Maximum number of worker threads. None uses the
                concurrent.futures default.
        """
        self._max_workers = max_workers
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="myls-enum"
        )

    def submit(
        self,
        fn: Callable[..., object],
        *args: object,
        **kwargs: object,
    ) -> Future[object]:
        """Queue fn on the pool and return its future."""
        return self._executor.submit(fn, *args, **kwargs)

    def __enter__(self) -> ThreadPoolExecutorAdapter:
        self._executor.__enter__()
        return self

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        logger.debug("Shutting down enumeration pool (%s workers)", self._max_workers)
        # ThreadPoolExecutor.__exit__ wants concrete types; the Protocol uses object
        return self._executor.__exit__(exc_type, exc_val, exc_tb)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"ThreadPoolExecutorAdapter(max_workers={self._max_workers})"
