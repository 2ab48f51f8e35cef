import logging
from pathlib import Path

from routemark.core.grammars import get_grammar
from routemark.core.languages import resolve_language
from routemark.core.ports.grammar import SourceGrammar
from routemark.models import Group, GroupKind, ParsedFile

logger = logging.getLogger(__name__)


def split_lines(content: str) -> list[str]:
    """Split on ``\\n`` keeping terminators; the last line may lack one."""
    lines = content.split("\n")
    tail = lines.pop()
    result = [line + "\n" for line in lines]
    if tail:
        result.append(tail)
    return result


def segment_source(content: str, grammar: SourceGrammar) -> list[Group]:
    """Split *content* into comment, action and other groups.

    Joining the bodies of the returned groups reproduces *content* exactly.
    """
    lines = split_lines(content)
    if not lines:
        return []

    outline = grammar.scan(content.encode("utf-8"))
    action_starts: dict[int, tuple[str, int]] = {}
    for span in outline.actions:
        if span.first_row in action_starts:
            kept = action_starts[span.first_row][0]
            logger.debug("Skipping action %s: %s already opens on line %d", span.name, kept, span.first_row + 1)
            continue
        action_starts[span.first_row] = (span.name, span.last_row)

    groups: list[Group] = []
    row = 0
    while row < len(lines):
        if row in action_starts:
            name, last_row = action_starts[row]
            last_row = min(max(last_row, row), len(lines) - 1)
            groups.append(Group(GroupKind.ACTION, "".join(lines[row : last_row + 1]), name))
            row = last_row + 1
            continue

        kind = GroupKind.COMMENT if row in outline.comment_rows else GroupKind.OTHER
        if groups and groups[-1].kind is kind:
            groups[-1].body += lines[row]
        else:
            groups.append(Group(kind, lines[row]))
        row += 1
    return groups


def parse_file(path: Path, language: str | None = None) -> ParsedFile:
    resolved_language = resolve_language(language, path)
    content = path.read_bytes().decode("utf-8")
    groups = segment_source(content, get_grammar(resolved_language))
    return ParsedFile(path=path, language=resolved_language, content=content, groups=groups)
