from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"


class ReadinessResponse(BaseModel):
    status: str = "ok"
    toolchain: str = "up"


class LocationResponse(BaseModel):
    repository: str
    revision: str
    relative_path: str
    standard_library: bool
