from typing import Any, NamedTuple, Protocol


class ActionSpan(NamedTuple):
    """Rows (0-based, inclusive) that open a named action definition."""

    name: str
    first_row: int
    last_row: int


class SourceOutline(NamedTuple):
    comment_rows: set[int]
    actions: list[ActionSpan]


class SourceGrammar(Protocol):
    language: str
    comment_marker: str

    def scan(self, source: bytes) -> SourceOutline: ...

    def render_literal(self, value: Any) -> str: ...
