"""Ordered lists of menu items."""

from __future__ import annotations

import logging
import weakref
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from menukit.config import INDENT, MENUKIT_LIST_ELEMENT
from menukit.content import LinkContent, RawContent, UrlSource
from menukit.html_utils import wrap_element
from menukit.item import Item
from menukit.request import RequestContext
from menukit.schemas.options import RenderOptions, explicit_options, merge_options

logger = logging.getLogger(__name__)


class ItemList:
    """An ordered list of menu items, rendered as a ``ul`` element by default.

    The request context is passed in explicitly on the top-level list. Nested
    lists find it through the item they hang under.

    Args:
        items: Items to add, in order. They must have been created for this list.
        request: The request the menu is rendered for.
        element: Tag name of the list element, ``None`` to render items bare.
        attributes: HTML attributes of the list element.
        prefix: Path prepended to the relative link URLs of this list's items.
        options: Render options passed down to every item.
    """

    def __init__(
        self,
        items: Iterable[Item] | None = None,
        *,
        request: RequestContext | None = None,
        element: str | None = MENUKIT_LIST_ELEMENT,
        attributes: Mapping[str, Any] | None = None,
        prefix: str | None = None,
        options: Mapping[str, Any] | RenderOptions | None = None,
    ) -> None:
        self.items: list[Item] = []
        self.request = request
        self.element = element
        self.attributes: dict[str, Any] = dict(attributes or {})
        self.prefix = prefix
        self.options = merge_options(RenderOptions(), options)
        self._parent_ref: weakref.ReferenceType[Item] | None = None

        for item in items or []:
            self.add_item(item)

    @property
    def parent(self) -> Item | None:
        """The item this list is nested under, if any."""
        return self._parent_ref() if self._parent_ref is not None else None

    @parent.setter
    def parent(self, item: Item | None) -> None:
        self._parent_ref = weakref.ref(item) if item is not None else None

    def add(
        self,
        url: UrlSource,
        label: str,
        children: ItemList | None = None,
        options: Mapping[str, Any] | None = None,
        *,
        attributes: Mapping[str, Any] | None = None,
        link_attributes: Mapping[str, Any] | None = None,
    ) -> Item:
        """Append a link item and return it."""
        content = LinkContent(url, label, dict(link_attributes or {}))
        return self.add_item(Item(self, content, children, options, attributes=attributes))

    def raw(
        self,
        value: str,
        children: ItemList | None = None,
        options: Mapping[str, Any] | None = None,
        *,
        attributes: Mapping[str, Any] | None = None,
    ) -> Item:
        """Append an item holding raw HTML or text and return it."""
        return self.add_item(Item(self, RawContent(value), children, options, attributes=attributes))

    def add_item(self, item: Item) -> Item:
        if item.get_list() is not self:
            raise ValueError("Item was created for a different list")
        self.items.append(item)
        return item

    def get_items(self) -> list[Item]:
        return self.items

    def get_request(self) -> RequestContext | None:
        """Return this list's request context, or the one of the enclosing list."""
        if self.request is not None:
            return self.request
        parent = self.parent
        return parent.get_request() if parent is not None else None

    def render(self, options: Mapping[str, Any] | RenderOptions | None = None) -> str:
        """Render every item, in order, inside the list element.

        Empty lists render to an empty string.
        """
        if not self.items:
            return ""

        current = merge_options(self.options, options)
        depth = current.render_depth
        item_depth = depth + 1 if self.element else depth
        logger.debug("Rendering %d menu items at depth %d", len(self.items), item_depth)

        inherited = explicit_options(current)
        inherited["render_depth"] = item_depth
        content = "\n".join(item.render(inherited) for item in self.items)

        if not self.element:
            return content
        return INDENT * depth + wrap_element(
            self.element, "\n" + content + "\n" + INDENT * depth, self.attributes
        )

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)

    def __str__(self) -> str:
        return self.render()
