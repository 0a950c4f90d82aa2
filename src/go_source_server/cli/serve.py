import dataclasses
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from go_source_server.logs import configure_logging
from go_source_server.settings import Settings

serve_app = typer.Typer(help="Start servers.")
console = Console()
err_console = Console(stderr=True)


def _settings(data_dir: Path | None, log_level: str | None) -> Settings:
    settings = Settings.load()
    if data_dir is not None:
        settings = dataclasses.replace(settings, data_dir=data_dir)
    if log_level is not None:
        settings = dataclasses.replace(settings, log_level=log_level.upper())
    return settings


@serve_app.command("api")
def api(
    host: Annotated[str | None, typer.Option(help="Interface to bind.")] = None,
    port: Annotated[int | None, typer.Option(help="Port to listen on.")] = None,
    data_dir: Annotated[Path | None, typer.Option(help="Data dir for the module cache.")] = None,
    log_level: Annotated[str | None, typer.Option(help="Log level (DEBUG, INFO, ...).")] = None,
) -> None:
    """Start the HTTP source server."""
    import uvicorn

    from go_source_server.api.app import create_app

    settings = _settings(data_dir, log_level)
    if host is not None:
        settings = dataclasses.replace(settings, host=host)
    if port is not None:
        settings = dataclasses.replace(settings, port=port)
    configure_logging(settings.log_level)

    app = create_app(settings)
    console.print(f"[green]Starting source server on {settings.host}:{settings.port}[/green]")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


@serve_app.command("mcp")
def mcp(
    transport: str = "stdio",
    data_dir: Annotated[Path | None, typer.Option(help="Data dir for the module cache.")] = None,
    log_level: Annotated[str | None, typer.Option(help="Log level (DEBUG, INFO, ...).")] = None,
) -> None:
    """Start the MCP server."""
    from go_source_server.golang import GoModuleMaterializer, GoRootProvider
    from go_source_server.mcp.server import create_mcp_server

    settings = _settings(data_dir, log_level)
    configure_logging(settings.log_level)

    server = create_mcp_server(
        GoModuleMaterializer(settings),
        GoRootProvider(settings),
        default_revision=settings.default_revision,
    )
    err_console.print(f"[green]Starting MCP server (transport: {transport})[/green]")
    server.run(transport=transport)  # type: ignore[arg-type]
