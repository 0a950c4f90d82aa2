"""Module materialization through ``go mod download``."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from go_source_server.core.errors import MaterializationError
from go_source_server.core.location import ModuleSnapshot
from go_source_server.settings import Settings

logger = logging.getLogger(__name__)


class GoModuleInfo(BaseModel):
    """The JSON object printed by ``go mod download -json``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    path: str = Field("", alias="Path")
    version: str = Field("", alias="Version")
    query: str = Field("", alias="Query")
    info: str = Field("", alias="Info")
    go_mod: str = Field("", alias="GoMod")
    zip: str = Field("", alias="Zip")
    dir: str = Field("", alias="Dir")
    sum: str = Field("", alias="Sum")
    go_mod_sum: str = Field("", alias="GoModSum")
    error: str = Field("", alias="Error")


def parse_module_info(stdout: bytes) -> GoModuleInfo:
    return GoModuleInfo.model_validate_json(stdout)


class GoModuleMaterializer:
    """Download modules into the configured cache and report their directory.

    Implements the ``ModuleMaterializer`` protocol. The go tool serializes
    concurrent writers to the same cache entry itself.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def command(self, repository: str, revision: str) -> list[str]:
        return [self._settings.go_binary, "mod", "download", "-json", f"{repository}@{revision}"]

    def environment(self) -> dict[str, str]:
        return {**os.environ, **self._settings.go_env()}

    async def _run(self, cmd: list[str]) -> tuple[int, bytes, bytes]:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            env=self.environment(),
        )
        try:
            stdout, stderr = await proc.communicate()
        except asyncio.CancelledError:
            if proc.returncode is None:
                proc.kill()
                await proc.wait()
            raise
        assert proc.returncode is not None
        return proc.returncode, stdout, stderr

    async def materialize(self, repository: str, revision: str) -> ModuleSnapshot:
        cmd = self.command(repository, revision)
        logger.info("Running command %s", cmd)
        try:
            returncode, stdout, stderr = await self._run(cmd)
        except OSError as exc:
            raise MaterializationError(repository, revision, f"could not run {cmd[0]}: {exc}") from exc

        try:
            info = parse_module_info(stdout)
        except ValidationError as exc:
            detail = stderr.decode(errors="replace").strip() or f"unparsable output: {exc}"
            raise MaterializationError(repository, revision, detail) from exc

        if returncode != 0:
            detail = info.error or stderr.decode(errors="replace").strip() or f"exit status {returncode}"
            raise MaterializationError(repository, revision, detail)

        if not info.dir:
            raise MaterializationError(repository, revision, f"no module directory in {info.model_dump(by_alias=True)!r}")

        logger.info("Found go module %s at %s (version %s)", info.path, info.dir, info.version)
        return ModuleSnapshot(
            directory=Path(info.dir),
            repository=info.path or repository,
            revision=info.version or revision,
        )
