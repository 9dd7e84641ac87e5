"""Executor adapters for parallel directory enumeration."""

from myls.adapters.executor.executor import (
    SynchronousExecutor,
    ThreadPoolExecutorAdapter,
)


__all__ = ["SynchronousExecutor", "ThreadPoolExecutorAdapter"]
