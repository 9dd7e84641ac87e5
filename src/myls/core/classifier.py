"""Operand classification.

Partitions command operands into directories and plain files by probing the
filesystem. A path that opens as a directory is a directory; otherwise a
link-unaware stat decides whether it exists at all.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from myls.config import CURRENT_DIRECTORY
from myls.core.exceptions import PathAccessError
from myls.core.models import ClassifiedOperands
from myls.core.options import is_flag
from myls.core.ports import NullDiagnosticReporter


if TYPE_CHECKING:
    from collections.abc import Iterable

    from myls.core.ports import DiagnosticReporter, FilesystemPort


logger = logging.getLogger(__name__)


def classify(
    operands: Iterable[str],
    filesystem: FilesystemPort,
    reporter: DiagnosticReporter | None = None,
) -> ClassifiedOperands:
    """Partition operands into files, directories and dropped paths.

    Operands are processed in input order and flag tokens are skipped. An
    operand that is neither an openable directory nor a stat-able path is
    reported and dropped. If nothing was accepted, the current directory is
    listed instead.

    Args:
        operands: Command-line tokens; flag tokens are ignored.
        filesystem: Filesystem adapter used for probing.
        reporter: Receives one diagnostic per inaccessible operand.

    Returns:
        ClassifiedOperands with every operand in exactly one bucket.
    """
    if reporter is None:
        reporter = NullDiagnosticReporter()

    result = ClassifiedOperands()
    for operand in operands:
        if is_flag(operand):
            continue

        if filesystem.probe_directory(operand):
            logger.debug("Classified %r as directory", operand)
            result.directories.append(operand)
            continue

        try:
            filesystem.lstat(operand)
        except PathAccessError as e:
            logger.debug("Dropping %r: %s", operand, e.cause or e)
            reporter.report(f"myls: cannot access -- {operand}")
            result.dropped.append(operand)
            continue

        logger.debug("Classified %r as file", operand)
        result.files.append(operand)

    # Substitute the current directory once, after every operand was seen
    if result.is_empty:
        result.directories.append(CURRENT_DIRECTORY)

    return result
