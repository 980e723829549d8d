"""Tests for item content."""

from __future__ import annotations

import pytest

from menukit.content import Content, LinkContent, RawContent
from menukit.item import Item
from menukit.item_list import ItemList
from menukit.request import RequestContext


class TestRawContent:
    """Tests for RawContent."""

    def test_renders_verbatim(self) -> None:
        content = RawContent("<strong>Home</strong>")

        assert content.render() == "<strong>Home</strong>"
        assert str(content) == "<strong>Home</strong>"

    def test_is_not_a_link(self) -> None:
        content = RawContent("Home")

        assert not content.is_link()
        assert content.get_evaluated_url() is None


class TestBinding:
    """Tests for binding content to items."""

    def test_in_item_returns_bound_copy(self) -> None:
        menu = ItemList()
        content = RawContent("Home")
        item = Item(menu, content)

        assert item.content is not content
        assert item.content == content
        assert item.content.get_item() is item

    def test_unbound_content_has_no_item(self) -> None:
        assert RawContent("Home").get_item() is None

    def test_base_content_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Content()  # type: ignore[abstract]


class TestLinkContent:
    """Tests for LinkContent."""

    def test_unbound_url_is_returned_as_given(self) -> None:
        content = LinkContent("/about", "About")

        assert content.is_link()
        assert content.get_evaluated_url() == "/about"

    def test_callable_url_is_evaluated(self, request_context: RequestContext) -> None:
        menu = ItemList(request=request_context)
        item = menu.add(lambda: "/about", "About")

        assert item.get_url() == "http://example.com/about"
        assert item.is_active()

    def test_absolute_url_is_not_resolved(self, request_context: RequestContext) -> None:
        menu = ItemList(request=request_context, prefix="admin")
        item = menu.add("https://docs.example.org/guide", "Docs")

        assert item.get_url() == "https://docs.example.org/guide"

    def test_relative_url_without_request_keeps_prefix(self) -> None:
        menu = ItemList(prefix="admin/")
        item = menu.add("/users", "Users")

        assert item.get_url() == "admin/users"

    def test_renders_anchor_with_attributes(self) -> None:
        content = LinkContent("/search?q=a&page=2", "Search", {"title": "Find \"things\""})

        assert content.render() == (
            '<a href="/search?q=a&amp;page=2" title=\'Find "things"\'>Search</a>'
        )

    def test_mailto_link_is_not_prefixed(self, request_context: RequestContext) -> None:
        menu = ItemList(request=request_context, prefix="admin")
        item = menu.add("mailto:team@example.com", "Email us")

        assert item.get_url() == "mailto:team@example.com"

    def test_tel_link_is_not_prefixed(self, request_context: RequestContext) -> None:
        menu = ItemList(request=request_context, prefix="admin")
        item = menu.add("tel:+15550100", "Call us")

        assert item.get_url() == "tel:+15550100"

    def test_protocol_relative_link_is_not_prefixed(self, request_context: RequestContext) -> None:
        menu = ItemList(request=request_context, prefix="admin")
        item = menu.add("//cdn.example.com/docs", "Docs")

        assert item.get_url() == "//cdn.example.com/docs"
        assert not item.is_active()
