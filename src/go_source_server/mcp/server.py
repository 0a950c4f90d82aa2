"""FastMCP server exposing source lookup tools."""

from __future__ import annotations

from fastmcp import FastMCP

from go_source_server.core.errors import SourceServerError
from go_source_server.core.fetch import DEFAULT_REVISION, fetch_source
from go_source_server.core.location import SourceRequest
from go_source_server.core.ports.toolchain import ModuleMaterializer, StandardLibraryRoot
from go_source_server.core.resolve import resolve


def create_mcp_server(
    materializer: ModuleMaterializer,
    stdlib: StandardLibraryRoot,
    default_revision: str = DEFAULT_REVISION,
) -> FastMCP:
    """Create a FastMCP server wired to the given toolchain adapters."""

    mcp = FastMCP(
        "go-source-server",
        instructions="Find and read Go source files for symbols and paths recorded by profilers.",
    )

    @mcp.tool()
    async def resolve_location(path: str, function: str = "") -> dict[str, str]:
        """Resolve a recorded path to its module, revision and path within the module."""
        try:
            location = resolve(function, path)
        except SourceServerError as exc:
            return {"error": str(exc)}
        return {
            "repository": location.repository,
            "revision": location.revision,
            "relative_path": location.relative_path,
        }

    @mcp.tool()
    async def read_source(path: str, function: str = "", repository: str = "", revision: str = "") -> str:
        """Return the contents of the Go source file for a recorded location."""
        request = SourceRequest(path=path, symbol=function, repository=repository, revision=revision)
        try:
            source = await fetch_source(request, materializer, stdlib, default_revision=default_revision)
        except SourceServerError as exc:
            return f"Error: {exc}"
        return source.content.decode("utf-8", errors="replace")

    return mcp
