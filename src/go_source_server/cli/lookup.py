import asyncio
import dataclasses
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from go_source_server.core.errors import SourceServerError
from go_source_server.core.fetch import fetch_source
from go_source_server.core.location import SourceRequest
from go_source_server.core.ports.toolchain import ModuleMaterializer, StandardLibraryRoot
from go_source_server.core.resolve import resolve as _resolve
from go_source_server.logs import configure_logging
from go_source_server.settings import Settings

console = Console()
err_console = Console(stderr=True)


def _get_toolchain(settings: Settings) -> tuple[ModuleMaterializer, StandardLibraryRoot]:
    from go_source_server.golang import GoModuleMaterializer, GoRootProvider

    return GoModuleMaterializer(settings), GoRootProvider(settings)


def resolve(
    function: Annotated[str, typer.Argument(help="Symbol the path was recorded for; may be empty.")],
    path: Annotated[str, typer.Argument(help="Recorded path of the source file.")],
) -> None:
    """Show the repository, revision and relative path for a recorded location."""
    try:
        location = _resolve(function, path)
    except SourceServerError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc

    table = Table(show_header=False)
    table.add_row("repository", location.repository or "(standard library)")
    table.add_row("revision", location.revision or "(default)")
    table.add_row("relative path", location.relative_path)
    console.print(table)


def fetch(
    path: Annotated[str, typer.Argument(help="Recorded path of the source file.")],
    function: Annotated[str, typer.Option(help="Symbol the path was recorded for.")] = "",
    repository: Annotated[str, typer.Option(help="Module path; skips symbol resolution.")] = "",
    revision: Annotated[str, typer.Option(help="Module revision.")] = "",
    data_dir: Annotated[Path | None, typer.Option(help="Data dir for the module cache.")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log progress to stderr.")] = False,
) -> None:
    """Print the source file for a recorded location to stdout."""
    settings = Settings.load()
    if data_dir is not None:
        settings = dataclasses.replace(settings, data_dir=data_dir)
    if verbose:
        configure_logging("DEBUG")

    materializer, stdlib = _get_toolchain(settings)
    request = SourceRequest(path=path, symbol=function, repository=repository, revision=revision)

    try:
        source = asyncio.run(
            fetch_source(request, materializer, stdlib, default_revision=settings.default_revision)
        )
    except SourceServerError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc

    sys.stdout.buffer.write(source.content)
    sys.stdout.buffer.flush()
