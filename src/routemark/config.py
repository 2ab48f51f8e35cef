import os
from pathlib import Path

from routemark.models import AnnotateOptions

DEFAULT_CONTROLLERS_PATTERN = "**/*_controller.rb"
DEFAULT_EXCLUSION_PATTERN = "vendor/**/*_controller.rb"
DEFAULT_ROUTES_FILE = "config/routes.json"


def load_options(
    *,
    dry_run: bool = False,
    error_on_annotation: bool = False,
    verbose: bool = False,
    controllers_pattern: str | None = None,
    exclusion_pattern: str | None = None,
    routes_file: str | Path | None = None,
) -> AnnotateOptions:
    """Build run options, falling back to environment variables and then to the defaults."""
    return AnnotateOptions(
        dry_run=dry_run,
        error_on_annotation=error_on_annotation,
        verbose=verbose,
        controllers_pattern=controllers_pattern
        or os.getenv("ROUTEMARK_CONTROLLERS_PATTERN", DEFAULT_CONTROLLERS_PATTERN),
        exclusion_pattern=exclusion_pattern or os.getenv("ROUTEMARK_EXCLUSION_PATTERN", DEFAULT_EXCLUSION_PATTERN),
        routes_file=Path(routes_file or os.getenv("ROUTEMARK_ROUTES_FILE", DEFAULT_ROUTES_FILE)),
    )
