"""Reconstruct ``{repository, revision, relative path}`` from a symbol and a recorded path.

Recorded paths come in a few shapes:

* ``/src/runtime/proc.go`` below some toolchain root (standard library),
* ``/home/runner/go/pkg/mod/github.com/org/repo@v1.2.3/file.go`` inside a module cache,
* ``github.com/org/repo@v1.2.3/file.go`` when built with ``-trimpath``,
* ``/home/runner/work/repo/repo/pkg/file.go`` for the main module.

The ``module@revision`` segment is the only part of the path that is trusted
as is. Everything else is reconstructed from the symbol's import path.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from go_source_server.core.errors import AmbiguousInputError
from go_source_server.core.location import SourceLocation
from go_source_server.core.symbol import ParsedSymbol, parse_symbol

VERSION_MARKER = "@"
MAX_VERSION_MARKERS = 8


@dataclass(frozen=True)
class RecordedPath:
    segments: tuple[str, ...]
    is_absolute: bool

    @classmethod
    def parse(cls, raw: str) -> RecordedPath:
        return cls(
            segments=tuple(s for s in raw.split("/") if s),
            is_absolute=raw.startswith("/"),
        )

    def join(self, start: int = 0, stop: int | None = None) -> str:
        return "/".join(self.segments[start:stop])

    def tail(self, count: int) -> str:
        count = min(count, len(self.segments))
        return self.join(len(self.segments) - count)


@dataclass(frozen=True)
class VersionMarker:
    index: int
    module_segment: str
    revision: str


def find_version_markers(path: RecordedPath, limit: int = MAX_VERSION_MARKERS) -> Iterator[VersionMarker]:
    """Yield ``module@revision`` segments in path order, at most *limit* of them.

    The final segment is the file name and is never treated as a marker.
    """
    found = 0
    for index, segment in enumerate(path.segments[:-1]):
        if found >= limit:
            return
        if VERSION_MARKER not in segment:
            continue
        module_segment, _, revision = segment.rpartition(VERSION_MARKER)
        found += 1
        yield VersionMarker(index=index, module_segment=module_segment, revision=revision)


def _direct_location(path: RecordedPath, marker: VersionMarker) -> SourceLocation:
    repository = "/".join((*path.segments[: marker.index], marker.module_segment))
    return SourceLocation(
        repository=repository,
        revision=marker.revision,
        relative_path=path.join(marker.index + 1),
    )


def _standard_library_path(path: RecordedPath, symbol: ParsedSymbol) -> str | None:
    package_root = symbol.qualifiers[0]
    for index in range(len(path.segments) - 1, -1, -1):
        if path.segments[index] == package_root:
            return path.join(index)
    return None


def resolve(symbol: str, raw_path: str) -> SourceLocation:
    """Resolve a recorded ``(symbol, path)`` pair into a :class:`SourceLocation`.

    Raises ``AmbiguousInputError`` if *symbol* is empty and *raw_path* is not
    of the ``module@revision/relative/path`` form.
    """
    path = RecordedPath.parse(raw_path)

    revision = ""
    relative_path = ""
    for marker in find_version_markers(path):
        if not path.is_absolute:
            return _direct_location(path, marker)
        # Inside a module cache: the innermost marker owns the file.
        revision = marker.revision
        relative_path = path.join(marker.index + 1)

    if not symbol:
        raise AmbiguousInputError(
            f"cannot resolve {raw_path!r} without a symbol; only module@revision/relative paths are self-describing"
        )

    parsed = parse_symbol(symbol)

    if parsed.is_standard_library:
        stdlib_path = _standard_library_path(path, parsed)
        if stdlib_path is not None:
            return SourceLocation(repository="", revision="", relative_path=stdlib_path)

    if not relative_path:
        # One segment per package directory plus the file name itself.
        relative_path = path.tail(len(parsed.package_parts) + 1)

    return SourceLocation(repository=parsed.repository, revision=revision, relative_path=relative_path)
