"""Error kinds raised while resolving and retrieving source files."""

from __future__ import annotations


class SourceServerError(Exception):
    """Base class for all retrieval failures."""


class AmbiguousInputError(SourceServerError, ValueError):
    """Raised when a path cannot be resolved without a symbol."""


class MaterializationError(SourceServerError):
    """Raised when a module could not be downloaded or its metadata is unusable."""

    def __init__(self, repository: str, revision: str, detail: str) -> None:
        super().__init__(f"failed to materialize {repository}@{revision}: {detail}")
        self.repository = repository
        self.revision = revision
        self.detail = detail


class StandardLibraryRootError(SourceServerError):
    """Raised when the toolchain's library source root cannot be discovered."""


class SourceNotFoundError(SourceServerError, LookupError):
    """Raised when no file under a snapshot matches the recorded path."""

    def __init__(self, root: str, recorded_path: str) -> None:
        super().__init__(f"no file under {root} matches {recorded_path!r}")
        self.root = root
        self.recorded_path = recorded_path


class SourceReadError(SourceServerError, OSError):
    """Raised when a matched file cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"could not read {path}: {reason}")
        self.path = path
        self.reason = reason


class OperationCancelledError(SourceServerError):
    """Raised by long-running work after the caller cancelled it."""
