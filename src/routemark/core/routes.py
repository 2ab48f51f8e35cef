import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from routemark.errors import ConfigurationError
from routemark.models import RouteDescriptor, RouteTable

logger = logging.getLogger(__name__)

_ROUTE_TABLE_ADAPTER = TypeAdapter(dict[str, dict[str, list[RouteDescriptor]]])


def merge_patch_put(descriptors: list[RouteDescriptor]) -> list[RouteDescriptor]:
    """Collapse an adjacent PATCH/PUT pair for the same route into one ``PATCH/PUT`` descriptor."""
    merged: list[RouteDescriptor] = []
    for descriptor in descriptors:
        if merged:
            previous = merged[-1]
            if (
                {previous.verb, descriptor.verb} == {"PATCH", "PUT"}
                and previous.path == descriptor.path
                and previous.name == descriptor.name
                and previous.defaults == descriptor.defaults
            ):
                merged[-1] = previous.model_copy(update={"verb": "PATCH/PUT"})
                continue
        merged.append(descriptor)
    return merged


def parse_route_table(raw: str | bytes) -> RouteTable:
    table = _ROUTE_TABLE_ADAPTER.validate_json(raw)
    return {
        controller.strip("/"): {action: merge_patch_put(descriptors) for action, descriptors in actions.items()}
        for controller, actions in table.items()
    }


def load_route_table(path: Path) -> RouteTable:
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        raise ConfigurationError(f"Route table not found: {path}") from None
    except OSError as exc:
        raise ConfigurationError(f"Could not read route table {path}: {exc}") from exc

    try:
        table = parse_route_table(raw)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid route table {path}: {exc.error_count()} error(s)") from exc

    logger.info("Loaded %d controller(s) from %s", len(table), path)
    return table
