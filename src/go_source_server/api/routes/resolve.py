from fastapi import APIRouter, HTTPException, Query

from go_source_server.api.schemas import LocationResponse
from go_source_server.core.errors import AmbiguousInputError
from go_source_server.core.resolve import resolve

router = APIRouter(prefix="/resolve", tags=["resolve"])


@router.get("/go", response_model=LocationResponse)
async def resolve_go(
    path: str = Query(..., min_length=1),
    function: str = Query(""),
) -> LocationResponse:
    """Show where a recorded path would be looked up, without downloading anything."""
    try:
        location = resolve(function, path)
    except AmbiguousInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return LocationResponse(
        repository=location.repository,
        revision=location.revision,
        relative_path=location.relative_path,
        standard_library=location.is_standard_library,
    )
