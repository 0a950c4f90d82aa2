import asyncio
import logging
from pathlib import Path

from go_source_server.core.errors import StandardLibraryRootError
from go_source_server.settings import Settings

logger = logging.getLogger(__name__)


class GoRootProvider:
    """Locate the standard library sources of the installed toolchain.

    Implements the ``StandardLibraryRoot`` protocol.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def goroot(self) -> Path:
        if self._settings.goroot is not None:
            return self._settings.goroot

        cmd = [self._settings.go_binary, "env", "GOROOT"]
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise StandardLibraryRootError(f"could not run {cmd[0]}: {exc}") from exc
        try:
            stdout, stderr = await proc.communicate()
        except asyncio.CancelledError:
            if proc.returncode is None:
                proc.kill()
                await proc.wait()
            raise
        if proc.returncode != 0:
            raise StandardLibraryRootError(f"{' '.join(cmd)} failed: {stderr.decode(errors='replace').strip()}")
        goroot = stdout.decode().strip()
        if not goroot:
            raise StandardLibraryRootError(f"{' '.join(cmd)} printed nothing")
        return Path(goroot)

    async def root(self) -> Path:
        src = await self.goroot() / "src"
        logger.debug("Standard library sources at %s", src)
        return src
