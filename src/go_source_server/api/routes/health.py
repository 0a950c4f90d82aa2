import logging

from fastapi import APIRouter, Depends, Response, status

from go_source_server.api.dependencies import get_stdlib_root
from go_source_server.api.schemas import HealthResponse, ReadinessResponse
from go_source_server.core.errors import StandardLibraryRootError
from go_source_server.core.ports.toolchain import StandardLibraryRoot

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    """Liveness probe: is the process alive?"""
    return HealthResponse()


@router.get("/healthz/ready", response_model=ReadinessResponse)
async def readiness(
    response: Response,
    stdlib: StandardLibraryRoot = Depends(get_stdlib_root),
) -> ReadinessResponse:
    """Readiness probe: checks that the Go toolchain can be found."""
    try:
        await stdlib.root()
    except StandardLibraryRootError:
        logger.warning("Go toolchain not available", exc_info=True)
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return ReadinessResponse(status="degraded", toolchain="down")
    return ReadinessResponse(status="ok", toolchain="up")
