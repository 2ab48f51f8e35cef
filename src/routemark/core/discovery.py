import logging
from collections.abc import Iterable
from pathlib import Path

from routemark.errors import ConfigurationError
from routemark.models import RouteDescriptor, RouteTable

logger = logging.getLogger(__name__)

_CONTROLLER_SUFFIX = "_controller"


def _glob(root: Path, pattern: str) -> set[Path]:
    if Path(pattern).is_absolute():
        raise ConfigurationError(f"Glob patterns must be relative to the project root: {pattern}")
    try:
        return set(root.glob(pattern))
    except (NotImplementedError, ValueError) as exc:
        raise ConfigurationError(f"Invalid glob pattern {pattern!r}: {exc}") from exc


def discover_controller_files(root: Path, pattern: str, exclusion_pattern: str | None = None) -> list[Path]:
    candidates = {path for path in _glob(root, pattern) if path.is_file()}
    if exclusion_pattern:
        candidates -= _glob(root, exclusion_pattern)
    return sorted(candidates)


def controller_for_path(relative_path: Path, controllers: Iterable[str]) -> str | None:
    """Return the longest controller name whose conventional file is *relative_path*.

    ``api/v1/users`` matches ``app/controllers/api/v1/users_controller.rb``.
    """
    stem = relative_path.with_suffix("").as_posix()
    best: str | None = None
    for controller in controllers:
        target = controller.strip("/") + _CONTROLLER_SUFFIX
        if (stem == target or stem.endswith("/" + target)) and (best is None or len(controller) > len(best)):
            best = controller
    return best


def pair_routes_with_files(
    route_table: RouteTable, paths: Iterable[Path], root: Path
) -> list[tuple[Path, dict[str, list[RouteDescriptor]]]]:
    """Pair each candidate file with its controller's actions; files without routes get an empty mapping."""
    pairs: list[tuple[Path, dict[str, list[RouteDescriptor]]]] = []
    matched: set[str] = set()
    for path in paths:
        try:
            relative = path.relative_to(root)
        except ValueError:
            relative = path
        controller = controller_for_path(relative, route_table)
        if controller is None:
            logger.debug("No routes for %s", relative)
            pairs.append((path, {}))
            continue
        matched.add(controller)
        pairs.append((path, route_table[controller]))

    for controller in sorted(set(route_table) - matched):
        logger.debug("No controller file found for %s", controller)
    return pairs
