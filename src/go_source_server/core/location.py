"""Value objects passed between the resolver, the toolchain adapters and the locator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


@dataclass(frozen=True)
class SourceLocation:
    """Where a recorded file lives.

    An empty ``repository`` means the standard library. An empty ``revision``
    means the caller decides which revision to use.
    """

    repository: str
    revision: str
    relative_path: str

    @property
    def is_standard_library(self) -> bool:
        return self.repository == ""


@dataclass(frozen=True)
class ModuleSnapshot:
    directory: Path
    repository: str
    revision: str


@dataclass(frozen=True)
class SourceFile:
    location: SourceLocation
    path: Path
    content: bytes


class SourceRequest(BaseModel):
    """A single retrieval request as received at the boundary."""

    model_config = ConfigDict(frozen=True)

    path: str
    symbol: str = ""
    repository: str = ""
    revision: str = ""

    @field_validator("path")
    @classmethod
    def _path_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("path must not be empty")
        return value
