from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from routemark.config import load_options
from routemark.core.annotate import STATUS_ERROR, exit_code, run, summarize
from routemark.errors import ConfigurationError

console = Console()
err_console = Console(stderr=True)


def annotate(
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Run without file modifications.")] = False,
    error_on_annotation: Annotated[
        bool, typer.Option("--exit-with-error-on-annotation", help="Fail if any file was annotated.")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Print all annotated files.")] = False,
    controllers_pattern: Annotated[
        str | None, typer.Option("--controllers-pattern", help="Glob for controller files, relative to the root.")
    ] = None,
    exclusion_pattern: Annotated[
        str | None, typer.Option("--exclusion-pattern", help="Glob for controller files to leave alone.")
    ] = None,
    routes: Annotated[Path | None, typer.Option("--routes", help="Route table JSON file.")] = None,
    root: Annotated[Path, typer.Option("--root", help="Project root directory.")] = Path("."),
) -> None:
    """Annotate controller actions with their routes."""
    options = load_options(
        dry_run=dry_run,
        error_on_annotation=error_on_annotation,
        verbose=verbose,
        controllers_pattern=controllers_pattern,
        exclusion_pattern=exclusion_pattern,
        routes_file=routes,
    )
    try:
        result = run(options, root)
    except ConfigurationError as exc:
        err_console.print("[red]Please run routemark from the root of your project.[/red]")
        err_console.print(str(exc), markup=False)
        raise typer.Exit(STATUS_ERROR) from None

    console.print(summarize(result, options), markup=False, highlight=False, soft_wrap=True)
    raise typer.Exit(exit_code(result, options))
