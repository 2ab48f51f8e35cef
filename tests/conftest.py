"""Shared fixtures and helpers for tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from routemark.core.grammars import PYTHON, RUBY, TreeSitterGrammar
from routemark.models import RouteDescriptor

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------

WATERLILIES_CONTROLLER = """\
class WaterliliesController < ApplicationController
  # Shows a lily.
  def show
  end

  def create
  end

  private

  def helper
  end
end
"""


@pytest.fixture
def ruby_grammar() -> TreeSitterGrammar:
    return RUBY


@pytest.fixture
def python_grammar() -> TreeSitterGrammar:
    return PYTHON


@pytest.fixture
def show_routes() -> list[RouteDescriptor]:
    return [
        RouteDescriptor(verb="GET", path="/waterlilies/:id", name="waterlily"),
        RouteDescriptor(verb="GET", path="/lilies/:id", defaults={"format": "json"}),
    ]


def write_project(root: Path, files: dict[str, str], routes: dict[str, Any]) -> None:
    """Lay out *files* under *root* and write the route table to config/routes.json."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
    routes_path = root / "config" / "routes.json"
    routes_path.parent.mkdir(parents=True, exist_ok=True)
    routes_path.write_text(json.dumps(routes), encoding="utf-8")
