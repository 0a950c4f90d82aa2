import asyncio
import logging
from pathlib import Path

from go_source_server.core.cancel import CancelToken
from go_source_server.core.errors import SourceReadError
from go_source_server.core.locate import locate
from go_source_server.core.location import SourceFile, SourceLocation, SourceRequest
from go_source_server.core.ports.toolchain import ModuleMaterializer, StandardLibraryRoot
from go_source_server.core.resolve import resolve

logger = logging.getLogger(__name__)

DEFAULT_REVISION = "latest"


def resolve_request(request: SourceRequest) -> SourceLocation:
    """Turn a boundary request into a location, without touching the filesystem."""
    if request.repository:
        return SourceLocation(
            repository=request.repository,
            revision=request.revision,
            relative_path=request.path.lstrip("/"),
        )
    return resolve(request.symbol, request.path)


async def _directory_for(
    location: SourceLocation,
    request: SourceRequest,
    materializer: ModuleMaterializer,
    stdlib: StandardLibraryRoot,
    default_revision: str,
) -> Path:
    if location.is_standard_library:
        return await stdlib.root()

    revision = location.revision or request.revision or default_revision
    snapshot = await materializer.materialize(location.repository, revision)
    logger.info(
        "Materialized %s@%s as %s@%s in %s",
        location.repository,
        revision,
        snapshot.repository,
        snapshot.revision,
        snapshot.directory,
    )
    return snapshot.directory


async def _find_file(directory: Path, location: SourceLocation, recorded_path: str) -> Path:
    direct = (directory / location.relative_path).resolve()
    if direct.is_relative_to(directory.resolve()) and direct.is_file():
        return direct

    cancel = CancelToken()
    try:
        relative = await asyncio.to_thread(locate, directory, recorded_path, cancel)
    except asyncio.CancelledError:
        cancel.cancel()
        raise
    logger.info("Located %s as %s", recorded_path, relative)
    return directory / relative


def _read(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise SourceReadError(str(path), exc.strerror or str(exc)) from exc


async def fetch_source(
    request: SourceRequest,
    materializer: ModuleMaterializer,
    stdlib: StandardLibraryRoot,
    default_revision: str = DEFAULT_REVISION,
) -> SourceFile:
    """Resolve, materialize, locate and read the file a request refers to.

    Errors from every stage propagate unchanged.
    """
    location = resolve_request(request)
    logger.info(
        "Resolved %r to repository=%r revision=%r path=%r",
        request.path,
        location.repository,
        location.revision,
        location.relative_path,
    )
    directory = await _directory_for(location, request, materializer, stdlib, default_revision)
    path = await _find_file(directory, location, request.path)
    return SourceFile(location=location, path=path, content=_read(path))
