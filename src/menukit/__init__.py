"""menukit: build and render nested HTML navigation menus."""

from menukit.content import Content, LinkContent, RawContent
from menukit.exceptions import (
    InvalidChildrenError,
    InvalidContentError,
    InvalidOptionsError,
    MenukitError,
)
from menukit.item import Item
from menukit.item_list import ItemList
from menukit.request import RequestContext
from menukit.schemas import RenderOptions

__all__ = [
    "Content",
    "InvalidChildrenError",
    "InvalidContentError",
    "InvalidOptionsError",
    "Item",
    "ItemList",
    "LinkContent",
    "MenukitError",
    "RawContent",
    "RenderOptions",
    "RequestContext",
]
