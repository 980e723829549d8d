"""Tests for the render_menu developer script."""

from __future__ import annotations

import importlib.util
import json
from pathlib import Path
from types import ModuleType

import pytest

from menukit.request import RequestContext

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "render_menu.py"


@pytest.fixture
def render_menu() -> ModuleType:
    spec = importlib.util.spec_from_file_location("render_menu", SCRIPT)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


DEFINITION = [
    {"url": "/", "label": "Home"},
    {
        "url": "/company",
        "label": "Company",
        "children": [{"url": "/company/team", "label": "Team"}],
    },
    {"raw": "<hr>"},
]


class TestBuildMenu:
    """Tests for build_menu."""

    def test_builds_nested_lists(self, render_menu: ModuleType) -> None:
        menu = render_menu.build_menu(DEFINITION)

        items = menu.get_items()
        assert len(items) == 3
        assert items[1].has_children()
        assert not items[2].content.is_link()

    def test_highlights_current_page(self, render_menu: ModuleType) -> None:
        request = RequestContext.from_url("http://example.com/company/team")

        html = render_menu.build_menu(DEFINITION, request=request).render()

        assert '<li class="active-child">' in html
        assert '<li class="active">' in html


class TestLoadDefinition:
    """Tests for load_definition."""

    def test_reads_local_file(self, render_menu: ModuleType, tmp_path: Path) -> None:
        path = tmp_path / "menu.json"
        path.write_text(json.dumps(DEFINITION), encoding="utf-8")

        assert render_menu.load_definition(url=None, file_path=str(path)) == DEFINITION

    def test_missing_file_raises(self, render_menu: ModuleType, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            render_menu.load_definition(url=None, file_path=str(tmp_path / "missing.json"))


class TestPrefix:
    """Tests for the link prefix in built menus."""

    def test_prefix_reaches_nested_links(self, render_menu: ModuleType) -> None:
        definition = [
            {"url": "company", "label": "Company", "children": [{"url": "team", "label": "Team"}]},
        ]
        request = RequestContext.from_url("http://example.com/admin/team")

        menu = render_menu.build_menu(definition, request=request, prefix="admin")
        parent = menu.get_items()[0]
        child = parent.children.get_items()[0]

        assert parent.get_url() == "http://example.com/admin/company"
        assert child.get_url() == "http://example.com/admin/team"
        assert child.is_active()
