"""Unit tests for stripping generated annotation lines."""

import pytest

from routemark.core.cleaner import clean_group, strip_annotations
from routemark.core.formatter import render_block
from routemark.core.grammars import PYTHON, RUBY
from routemark.models import Group, GroupKind, RouteDescriptor


@pytest.mark.parametrize(
    "line",
    [
        "# @route GET /waterlilies/:id (waterlily)\n",
        "  # @route POST /waterlilies\n",
        "    # @route PATCH/PUT /waterlilies/:id\n",
        '# @route GET /lilies {format: "json", id: 5} (lily)\n',
        '# @route GET /lilies {format: "json"}\n',
        "#@route DELETE /waterlilies/:id",
    ],
)
def test_removes_generated_lines(line: str) -> None:
    assert strip_annotations(line) == ""


@pytest.mark.parametrize(
    "line",
    [
        "# GET /waterlilies/:id\n",
        "  # PATCH/PUT /waterlilies/:id\n",
        "# DELETE /\n",
    ],
)
def test_removes_legacy_lines(line: str) -> None:
    assert strip_annotations(line) == ""


@pytest.mark.parametrize(
    "line",
    [
        "# @route is handled by the router\n",
        "# @route GET /lilies is deprecated\n",
        "# See the @route GET /lilies annotation\n",
        "# GET /lilies returns a list\n",
        "# get /lilies\n",
        "# Routes: GET /lilies\n",
    ],
)
def test_keeps_lookalike_comments(line: str) -> None:
    assert strip_annotations(line) == line


def test_keeps_developer_comments_around_annotations() -> None:
    body = "  # @route GET /a (a)\n  # GET /a\n  # Explains the action.\n"
    assert strip_annotations(body) == "  # Explains the action.\n"


def test_preserves_crlf_of_remaining_lines() -> None:
    body = "# @route GET /a\r\n# kept\r\n"
    assert strip_annotations(body) == "# kept\r\n"


def test_clean_group_only_touches_comments() -> None:
    other = Group(GroupKind.OTHER, "# @route GET /a\n")
    clean_group(other)
    assert other.body == "# @route GET /a\n"

    comment = Group(GroupKind.COMMENT, "# @route GET /a\n# keep\n")
    clean_group(comment)
    assert comment.body == "# keep\n"


def test_cleaning_is_idempotent() -> None:
    body = "  # @route GET /a {id: 1}\n  # note\n"
    once = strip_annotations(body)
    assert strip_annotations(once) == once


@pytest.mark.parametrize(
    "descriptor",
    [
        RouteDescriptor(verb="GET", path="/w/:id"),
        RouteDescriptor(verb="GET|POST", path="/w/:id"),
        RouteDescriptor(verb="M-SEARCH", path="*"),
        RouteDescriptor(verb="PATCH/PUT", path="/w/:id", name="a(b)"),
        RouteDescriptor(verb="get", path="/w", name="w", defaults={"id": 5, "format": "json"}),
        RouteDescriptor(verb="GET", path="/w", defaults={"q": "x) (y}", "nested": {"k": [1, None]}}),
    ],
    ids=["plain", "multi-verb", "extension-verb", "parenthesised-name", "defaults-and-name", "tricky-defaults"],
)
def test_strips_everything_the_formatter_writes(descriptor: RouteDescriptor) -> None:
    for grammar in (RUBY, PYTHON):
        block = render_block([descriptor], "  ", grammar.render_literal)
        assert strip_annotations(block) == ""
        assert strip_annotations(block + "  # kept\n") == "  # kept\n"
