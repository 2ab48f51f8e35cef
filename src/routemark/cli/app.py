import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from routemark.cli.annotate import annotate
from routemark.cli.routes import routes
from routemark.version import __version__

app = typer.Typer(
    name="routemark",
    help="routemark — annotate controller actions with their routes.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("annotate")(annotate)
app.command("routes")(routes)


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        print(__version__)
        raise typer.Exit()


@app.callback()
def _root(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=_version_callback, is_eager=True, help="Show version and quit."),
    ] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Show log messages.")] = False,
) -> None:
    if debug:
        _configure_logging()


def main() -> None:
    app()
