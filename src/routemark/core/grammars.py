"""Tree-sitter backed grammars that locate comment lines and action definitions.

Only the structural cues the segmenter needs are extracted: which rows are
full-line comments and which rows open a method defined directly inside a
class (or, for Ruby, a module). Methods nested in other methods, singleton
methods and ``class << self`` blocks are not actions.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, cast

from tree_sitter import Node
from tree_sitter_language_pack import SupportedLanguage, get_parser

from routemark.core.languages import normalize_language
from routemark.core.ports.grammar import ActionSpan, SourceOutline


@dataclass(frozen=True)
class TreeSitterGrammar:
    language: str
    comment_marker: str
    comment_types: frozenset[str]
    method_types: frozenset[str]
    container_types: frozenset[str]
    opaque_types: frozenset[str]
    wrapper_types: frozenset[str]
    nil_literal: str
    true_literal: str
    false_literal: str

    def scan(self, source: bytes) -> SourceOutline:
        parser = get_parser(cast(SupportedLanguage, self.language))
        tree = parser.parse(source)
        lines = source.split(b"\n")

        comment_rows: set[int] = set()
        actions: list[ActionSpan] = []
        stack: list[tuple[Node, str | None]] = [(tree.root_node, None)]
        while stack:
            node, scope = stack.pop()
            if node.type in self.comment_types:
                row, column = node.start_point[0], node.start_point[1]
                line = lines[row]
                if not line[:column].strip() and line.lstrip().startswith(self.comment_marker.encode()):
                    comment_rows.add(row)
                continue

            child_scope = scope
            if node.type in self.method_types:
                if scope in self.container_types:
                    span = self._action_span(node, source)
                    if span is not None:
                        actions.append(span)
                child_scope = node.type
            elif node.type in self.container_types or node.type in self.opaque_types:
                child_scope = node.type
            stack.extend((child, child_scope) for child in reversed(node.children))

        actions.sort(key=lambda span: span.first_row)
        return SourceOutline(comment_rows=comment_rows, actions=actions)

    def _action_span(self, node: Node, source: bytes) -> ActionSpan | None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None
        outer = node
        if node.parent is not None and node.parent.type in self.wrapper_types:
            outer = node.parent
        name = source[name_node.start_byte : name_node.end_byte].decode("utf-8")
        return ActionSpan(name=name, first_row=outer.start_point[0], last_row=name_node.start_point[0])

    def render_literal(self, value: Any) -> str:
        if value is None:
            return self.nil_literal
        if isinstance(value, bool):
            return self.true_literal if value else self.false_literal
        if isinstance(value, int | float):
            return repr(value)
        if isinstance(value, str):
            return json.dumps(value, ensure_ascii=False)
        if isinstance(value, Mapping):
            inner = ", ".join(f"{key}: {self.render_literal(item)}" for key, item in value.items())
            return "{" + inner + "}"
        if isinstance(value, list | tuple):
            return "[" + ", ".join(self.render_literal(item) for item in value) + "]"
        return json.dumps(str(value), ensure_ascii=False)


RUBY = TreeSitterGrammar(
    language="ruby",
    comment_marker="#",
    comment_types=frozenset({"comment"}),
    method_types=frozenset({"method"}),
    container_types=frozenset({"class", "module"}),
    opaque_types=frozenset({"singleton_method", "singleton_class"}),
    wrapper_types=frozenset(),
    nil_literal="nil",
    true_literal="true",
    false_literal="false",
)

PYTHON = TreeSitterGrammar(
    language="python",
    comment_marker="#",
    comment_types=frozenset({"comment"}),
    method_types=frozenset({"function_definition"}),
    container_types=frozenset({"class_definition"}),
    opaque_types=frozenset({"lambda"}),
    wrapper_types=frozenset({"decorated_definition"}),
    nil_literal="None",
    true_literal="True",
    false_literal="False",
)

_GRAMMARS: dict[str, TreeSitterGrammar] = {grammar.language: grammar for grammar in (RUBY, PYTHON)}


def get_grammar(language: str) -> TreeSitterGrammar:
    return _GRAMMARS[normalize_language(language)]
