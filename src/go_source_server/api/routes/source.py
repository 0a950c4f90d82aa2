import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse, Response

from go_source_server.api.cancellation import run_until_disconnected
from go_source_server.api.dependencies import get_materializer, get_settings, get_stdlib_root
from go_source_server.core.errors import AmbiguousInputError, OperationCancelledError, SourceServerError
from go_source_server.core.fetch import fetch_source, resolve_request
from go_source_server.core.location import SourceRequest
from go_source_server.core.ports.toolchain import ModuleMaterializer, StandardLibraryRoot
from go_source_server.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/source", tags=["source"])

# nginx's code for "client closed request"
_CLIENT_CLOSED_REQUEST = 499


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "-")


@router.get("/go", response_class=Response)
async def source_go(
    request: Request,
    path: str = Query("", description="Recorded path of the source file."),
    function: str = Query("", description="Symbol of the function the path was recorded for."),
    repository: str = Query("", description="Module path, when known; skips symbol resolution."),
    revision: str = Query("", description="Module revision; defaults to the server's default revision."),
    settings: Settings = Depends(get_settings),
    materializer: ModuleMaterializer = Depends(get_materializer),
    stdlib: StandardLibraryRoot = Depends(get_stdlib_root),
) -> Response:
    """Return the raw contents of the Go source file identified by the query."""
    if not path.strip():
        return PlainTextResponse("missing path", status_code=400)

    source_request = SourceRequest(path=path, symbol=function, repository=repository, revision=revision)

    # Fail input errors as client errors before any download starts.
    try:
        resolve_request(source_request)
    except AmbiguousInputError as exc:
        logger.warning("Rejected request %s: %s", _request_id(request), exc)
        return PlainTextResponse("missing function", status_code=400)

    try:
        source = await run_until_disconnected(
            request,
            fetch_source(source_request, materializer, stdlib, default_revision=settings.default_revision),
        )
    except OperationCancelledError:
        logger.info("Request %s cancelled before completion", _request_id(request))
        return Response(status_code=_CLIENT_CLOSED_REQUEST)
    except SourceServerError:
        logger.exception("Error retrieving source code for request %s", _request_id(request))
        return PlainTextResponse("error retrieving source code", status_code=500)

    return Response(content=source.content, media_type="text/plain; charset=utf-8")
