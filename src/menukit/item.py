"""A single entry in a menu list."""

from __future__ import annotations

import logging
import weakref
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from menukit.config import INDENT, MENUKIT_ITEM_ELEMENT
from menukit.content import Content
from menukit.exceptions import InvalidChildrenError, InvalidContentError
from menukit.html_utils import add_class, render_tabbed, wrap_element
from menukit.request import RequestContext
from menukit.schemas.options import RenderOptions, explicit_options, merge_options

if TYPE_CHECKING:
    from menukit.item_list import ItemList

logger = logging.getLogger(__name__)


class Item:
    """An item in a menu list.

    An item wraps a piece of content, may own a nested list of children, and
    renders itself and its subtree into tab-indented HTML. The owning list is
    held by weak reference only; the list owns its items.

    Args:
        item_list: The list this item belongs to.
        content: The item's content. It is bound to the item on construction.
        children: Optional nested list of child items. Empty values such as
            ``[]`` are treated like ``None``.
        options: Render option overrides, merged recursively over the defaults.
        attributes: HTML attributes of the item element.
        element: Tag name of the item element. ``None`` renders the content
            without a wrapping element.
    """

    def __init__(
        self,
        item_list: ItemList,
        content: Content,
        children: ItemList | None = None,
        options: Mapping[str, Any] | RenderOptions | None = None,
        *,
        attributes: Mapping[str, Any] | None = None,
        element: str | None = MENUKIT_ITEM_ELEMENT,
    ) -> None:
        if not isinstance(content, Content):
            raise InvalidContentError(
                f"Item content must be a Content instance, got {type(content).__name__}"
            )

        from menukit.item_list import ItemList

        if not isinstance(children, ItemList):
            if children:
                raise InvalidChildrenError(
                    f"Item children must be an ItemList, got {type(children).__name__}"
                )
            children = None

        self._list_ref = weakref.ref(item_list)
        self.children = children
        self.options = merge_options(RenderOptions(), options)
        self.attributes: dict[str, Any] = dict(attributes or {})
        self.element = element

        self.content = content.in_item(self)
        if children is not None:
            children.parent = self

    def render(self, options: Mapping[str, Any] | RenderOptions | None = None) -> str:
        """Render the item and its children.

        Incoming ``options`` are merged over the item's own options for this
        call only; the stored options are left untouched, so rendering the
        same item twice with the same arguments gives the same string.

        The opening and closing tags sit at ``render_depth`` tabs, the content
        one level deeper, and the children list is rendered at
        ``render_depth + 1`` with the options explicitly set on this item.
        """
        current = merge_options(self.options, options)
        depth = current.render_depth

        if not self.element:
            return self._render_body(current, depth)

        content = "\n" + self._render_body(current, depth + 1) + "\n" + INDENT * depth
        return INDENT * depth + wrap_element(self.element, content, self._active_attributes(current))

    def is_active(self) -> bool:
        """Check whether the item links to the current request URL."""
        url = self.get_url()
        if url is None:
            return False

        request = self.get_request()
        if request is None:
            logger.debug("No request context for item %r, treating it as inactive", url)
            return False

        return url == request.full_url or url == request.url

    def has_children(self) -> bool:
        return self.children is not None and len(self.children) > 0

    def has_active_child(self) -> bool:
        """Check whether one of the item's descendants is active.

        Children are scanned in order. The first child that is not active but
        has children of its own decides the result, later siblings are not
        looked at.
        """
        if not self.has_children():
            return False

        for child in self.children.get_items():
            if child.is_active():
                return True

            if child.has_children():
                return child.has_active_child()

        return False

    def get_list(self) -> ItemList | None:
        """Get the list this item belongs to, if it still exists."""
        return self._list_ref()

    def get_url(self) -> str | None:
        """Get the evaluated URL of the item's content, or None for non-links."""
        return self.content.get_evaluated_url() if self.content.is_link() else None

    def get_request(self) -> RequestContext | None:
        item_list = self.get_list()
        return item_list.get_request() if item_list is not None else None

    def _render_body(self, options: RenderOptions, depth: int) -> str:
        body = render_tabbed(self.content.render(), depth)

        if self.has_children():
            inherited = explicit_options(options)
            inherited["render_depth"] = depth
            body += "\n" + self.children.render(inherited)

        return body

    def _active_attributes(self, options: RenderOptions) -> dict[str, Any]:
        attributes = dict(self.attributes)
        if self.is_active():
            attributes = add_class(attributes, options.active_class)

        if self.has_active_child():
            attributes = add_class(attributes, options.active_child_class)

        return attributes

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Item(content={self.content!r}, children={len(self.children or [])})"
