"""Filesystem adapters."""

from myls.adapters.filesystem.local import LocalFilesystem


__all__ = ["LocalFilesystem"]
