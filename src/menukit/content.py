"""Payloads carried by menu items: links and raw markup."""

from __future__ import annotations

import copy
import weakref
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Union

import httpx

from menukit.html_utils import wrap_element

if TYPE_CHECKING:
    from menukit.item import Item

UrlSource = Union[str, Callable[[], str]]


@dataclass
class Content(ABC):
    """Base class for the content of a menu item."""

    _item_ref: weakref.ReferenceType[Item] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def is_link(self) -> bool:
        return False

    def get_evaluated_url(self) -> str | None:
        return None

    def in_item(self, item: Item) -> Content:
        """Return a copy of this content bound to ``item``."""
        bound = copy.copy(self)
        bound._item_ref = weakref.ref(item)
        return bound

    def get_item(self) -> Item | None:
        """Return the item this content is bound to, if it still exists."""
        return self._item_ref() if self._item_ref is not None else None

    @abstractmethod
    def render(self) -> str:
        """Render the content to HTML."""

    def __str__(self) -> str:
        return self.render()


@dataclass
class RawContent(Content):
    """Raw HTML or text, rendered verbatim."""

    value: str = ""

    def render(self) -> str:
        return self.value


@dataclass
class LinkContent(Content):
    """An anchor pointing at ``url``.

    ``url`` may be a literal or a zero-argument callable evaluated at render
    time. ``label`` is trusted markup and is not escaped.
    """

    url: UrlSource = ""
    label: str = ""
    attributes: dict[str, Any] = field(default_factory=dict)

    def is_link(self) -> bool:
        return True

    def get_evaluated_url(self) -> str:
        """Evaluate the link URL in the context of its item.

        Relative URLs get the owning list's prefix and are resolved against the
        root of the current request, so they compare equal to request URLs.
        URLs with a scheme (``mailto:``, ``https:``) or a host (``//cdn/x``)
        are returned unchanged.
        """
        url = self.url() if callable(self.url) else self.url
        item = self.get_item()
        if item is None or not _is_path_only(url):
            return url

        item_list = item.get_list()
        if item_list is not None and item_list.prefix:
            url = f"{item_list.prefix.rstrip('/')}/{url.lstrip('/')}"

        request = item.get_request()
        if request is not None:
            url = request.resolve(url)
        return url

    def render(self) -> str:
        attributes = {"href": self.get_evaluated_url(), **self.attributes}
        return wrap_element("a", self.label, attributes)


def _is_path_only(url: str) -> bool:
    parsed = httpx.URL(url)
    return parsed.scheme == "" and parsed.host == ""
