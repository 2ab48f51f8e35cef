from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from routemark.config import load_options
from routemark.core.annotate import STATUS_ERROR
from routemark.core.formatter import render_descriptor
from routemark.core.routes import load_route_table
from routemark.errors import ConfigurationError

console = Console()
err_console = Console(stderr=True)


def routes(
    routes_file: Annotated[Path | None, typer.Option("--routes", help="Route table JSON file.")] = None,
    root: Annotated[Path, typer.Option("--root", help="Project root directory.")] = Path("."),
    controller: Annotated[str | None, typer.Option(help="Only show this controller.")] = None,
) -> None:
    """List the route table and the annotation each route produces."""
    options = load_options(routes_file=routes_file)
    path = options.routes_file if options.routes_file.is_absolute() else root / options.routes_file
    try:
        table_data = load_route_table(path)
    except ConfigurationError as exc:
        err_console.print(str(exc), markup=False)
        raise typer.Exit(STATUS_ERROR) from None

    table = Table(show_lines=False)
    for header in ("controller", "action", "annotation"):
        table.add_column(header)
    count = 0
    for name, actions in sorted(table_data.items()):
        if controller is not None and name != controller.strip("/"):
            continue
        for action, descriptors in actions.items():
            for d in descriptors:
                table.add_row(name, action, render_descriptor(d.verb, d.path, d.name, d.defaults))
                count += 1
    console.print(table)
    console.print(f"({count} rows)")
