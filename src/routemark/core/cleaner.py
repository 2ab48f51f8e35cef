import re

from routemark.models import Group, GroupKind

# Lines written by render_block: "# @route VERB PATH [{defaults}] [(name)]"
_ROUTE_LINE = re.compile(
    r"^[ \t]*#[ \t]*@route[ \t]+\S+[ \t]+\S+"
    r"(?:[ \t]+\{.*\})?"
    r"(?:[ \t]+\(.*\))?"
    r"[ \t]*(?:\r?\n|\Z)",
    re.MULTILINE,
)

# Older releases wrote one bare "# VERB /path" line per route.
_LEGACY_LINE = re.compile(
    r"^[ \t]*# (?:GET|POST|PUT|PATCH|PATCH/PUT|DELETE) /\S*[ \t]*(?:\r?\n|\Z)",
    re.MULTILINE,
)


def strip_annotations(text: str) -> str:
    text = _ROUTE_LINE.sub("", text)
    return _LEGACY_LINE.sub("", text)


def clean_group(group: Group) -> None:
    if group.kind is not GroupKind.COMMENT:
        return
    group.body = strip_annotations(group.body)
