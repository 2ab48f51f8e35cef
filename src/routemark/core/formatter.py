import json
import re
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from routemark.models import RouteDescriptor

LiteralRenderer = Callable[[Any], str]

_INDENT = re.compile(r"[ \t]*")


def _default_literal(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, default=str)


def render_descriptor(
    verb: str,
    path: str,
    name: str | None = None,
    defaults: Mapping[str, Any] | None = None,
    literal: LiteralRenderer = _default_literal,
) -> str:
    """Render ``@route <verb> <path> [{<defaults>}] [(<name>)]``."""
    annotation = f"@route {verb} {path}"
    if defaults:
        defaults_str = ", ".join(f"{key}: {literal(value)}" for key, value in defaults.items())
        annotation += f" {{{defaults_str}}}"
    if name is not None:
        annotation += f" ({name})"
    return annotation


def render_block(
    descriptors: Iterable[RouteDescriptor],
    indent: str = "",
    literal: LiteralRenderer = _default_literal,
    newline: str = "\n",
) -> str:
    return "".join(
        f"{indent}# {render_descriptor(d.verb, d.path, d.name, d.defaults, literal)}{newline}" for d in descriptors
    )


def leading_indent(text: str) -> str:
    match = _INDENT.match(text)
    return match.group(0) if match else ""
