import typer

from go_source_server.cli.lookup import fetch, resolve
from go_source_server.cli.serve import serve_app

app = typer.Typer(
    name="go-source-server",
    help="Go source server: find and serve Go source files recorded by profilers.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("resolve")(resolve)
app.command("fetch")(fetch)
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
