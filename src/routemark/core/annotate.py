import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from routemark.core.cleaner import clean_group
from routemark.core.discovery import discover_controller_files, pair_routes_with_files
from routemark.core.formatter import LiteralRenderer, leading_indent, render_block
from routemark.core.grammars import get_grammar
from routemark.core.rewriter import maybe_write
from routemark.core.routes import load_route_table
from routemark.core.segmenter import parse_file
from routemark.errors import ConfigurationError, UnsupportedLanguageError, WriteFailure
from routemark.models import AnnotateOptions, Group, GroupKind, ParsedFile, RouteDescriptor, RunResult

logger = logging.getLogger(__name__)

ActionRoutes = Mapping[str, Sequence[RouteDescriptor]]

STATUS_SUCCESS = 0
STATUS_ERROR = 1


def annotate_parsed_file(parsed: ParsedFile, actions: ActionRoutes, literal: LiteralRenderer) -> None:
    """Clean every comment group, then write each routed action's block into the comment above it.

    An action with no comment group directly above it gets a new, empty one.
    """
    for group in parsed.groups:
        clean_group(group)

    found: set[str] = set()
    annotated: list[Group] = []
    for group in parsed.groups:
        if group.kind is GroupKind.ACTION and group.identity is not None:
            found.add(group.identity)
            descriptors = actions.get(group.identity)
            if descriptors:
                comment = annotated[-1] if annotated and annotated[-1].kind is GroupKind.COMMENT else None
                if comment is None:
                    comment = Group(GroupKind.COMMENT, "")
                    annotated.append(comment)
                indent = leading_indent(comment.body or group.body)
                newline = "\r\n" if group.body.endswith("\r\n") else "\n"
                comment.body = render_block(descriptors, indent, literal, newline) + comment.body
        annotated.append(group)
    parsed.groups = annotated

    for action in sorted(set(actions) - found):
        logger.debug("Action %s not found in %s", action, parsed.path)


def annotate_file(path: Path, actions: ActionRoutes, dry_run: bool = False) -> bool:
    parsed = parse_file(path)
    grammar = get_grammar(parsed.language)
    annotate_parsed_file(parsed, actions, grammar.render_literal)
    return maybe_write(path, parsed.content, parsed.render(), dry_run=dry_run)


def annotate_files(targets: Iterable[tuple[Path, ActionRoutes]], options: AnnotateOptions) -> RunResult:
    result = RunResult(dry_run=options.dry_run)
    for path, actions in targets:
        try:
            changed = annotate_file(path, actions, dry_run=options.dry_run)
        except WriteFailure as exc:
            logger.error("%s", exc)
            result.failed_files.append((path, exc.reason))
            continue
        except (OSError, UnicodeDecodeError, UnsupportedLanguageError) as exc:
            logger.warning("Skipping %s: %s", path, exc)
            result.failed_files.append((path, str(exc)))
            continue
        if changed:
            logger.info("Annotated %s", path)
            result.changed_files.append(path)
    return result


def run(options: AnnotateOptions, root: Path) -> RunResult:
    """Load the route table, discover controllers under *root* and annotate them."""
    if not root.is_dir():
        raise ConfigurationError(f"Project root is not a directory: {root}")
    routes_file = options.routes_file if options.routes_file.is_absolute() else root / options.routes_file
    route_table = load_route_table(routes_file)

    paths = discover_controller_files(root, options.controllers_pattern, options.exclusion_pattern)
    logger.info("Found %d controller file(s) matching %s", len(paths), options.controllers_pattern)
    return annotate_files(pair_routes_with_files(route_table, paths, root), options)


def exit_code(result: RunResult, options: AnnotateOptions) -> int:
    if result.changed_files and options.error_on_annotation:
        return STATUS_ERROR
    return STATUS_SUCCESS


def summarize(result: RunResult, options: AnnotateOptions) -> str:
    lines: list[str] = []
    if not result.changed_files:
        lines.append("Controller files unchanged.")
    else:
        if options.verbose:
            lines.extend(f"Annotated {path}" for path in result.changed_files)
        lines.append("routemark has finished running.")
    if options.dry_run:
        lines.append("This was a dry run so no files were changed.")
    if result.changed_files and options.error_on_annotation:
        lines.append("Exited with status code 1.")
    lines.extend(f"Failed to annotate {path}: {reason}" for path, reason in result.failed_files)
    return "\n".join(lines)
