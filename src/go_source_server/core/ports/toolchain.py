from pathlib import Path
from typing import Protocol

from go_source_server.core.location import ModuleSnapshot


class ModuleMaterializer(Protocol):
    async def materialize(self, repository: str, revision: str) -> ModuleSnapshot: ...


class StandardLibraryRoot(Protocol):
    async def root(self) -> Path: ...
