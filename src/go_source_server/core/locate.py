"""Find the file in a materialized tree that best matches a recorded path.

A path recorded on a build machine rarely matches the local tree verbatim:
the checkout root differs, code may be vendored, or the module may be nested
inside a larger repository. The locator therefore compares the recorded path
against every file's path relative to the root and keeps the deepest
segment-aligned suffix match.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from go_source_server.core.cancel import CancelToken
from go_source_server.core.errors import SourceNotFoundError

logger = logging.getLogger(__name__)


def is_segment_suffix(recorded_path: str, candidate: str) -> bool:
    """Return True if *recorded_path* ends with *candidate* on a ``/`` boundary."""
    if not candidate or not recorded_path.endswith(candidate):
        return False
    boundary = len(recorded_path) - len(candidate)
    return boundary == 0 or recorded_path[boundary - 1] == "/"


def _is_regular_file(path: str) -> bool:
    try:
        return stat.S_ISREG(os.lstat(path).st_mode)
    except OSError:
        return False


def _walk_relative_files(root: Path, cancel: CancelToken | None) -> list[str]:
    files: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for name in sorted(filenames):
            if cancel is not None:
                cancel.raise_if_cancelled()
            full = os.path.join(dirpath, name)
            if not _is_regular_file(full):
                continue
            files.append(Path(full).relative_to(root).as_posix())
    return files


def locate(root: str | Path, recorded_path: str, cancel: CancelToken | None = None) -> str:
    """Return the path, relative to *root*, of the file best matching *recorded_path*.

    Longer matches win. Every match is a suffix of the same string, so two
    distinct candidates never tie on length and the walk order is irrelevant.

    Raises ``SourceNotFoundError`` if no file matches, and
    ``OperationCancelledError`` if *cancel* fires during the walk.
    """
    root = Path(root)
    best: str | None = None
    for candidate in _walk_relative_files(root, cancel):
        if not is_segment_suffix(recorded_path, candidate):
            continue
        if best is None or len(candidate) > len(best):
            best = candidate

    if best is None:
        raise SourceNotFoundError(str(root), recorded_path)

    logger.debug("Matched %s to %s under %s", recorded_path, best, root)
    return best
