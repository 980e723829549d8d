"""Shared HTML utilities for menu rendering."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

try:
    from bs4.dammit import EntitySubstitution
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML rendering (pip install beautifulsoup4)."
    ) from exc

from menukit.config import INDENT

Attributes = dict[str, Any]


def render_tabbed(content: str, depth: int) -> str:
    """Prefix every line of ``content`` with ``depth`` indentation units."""
    prefix = INDENT * max(depth, 0)
    return "\n".join(prefix + line for line in content.split("\n"))


def add_class(attributes: Mapping[str, Any] | None, class_name: str | None) -> Attributes:
    """Return a copy of ``attributes`` with ``class_name`` appended to its class list.

    The class list may be given as a space-separated string or a sequence of
    names. Names already present are not added twice.
    """
    result: Attributes = dict(attributes or {})
    if not class_name:
        return result

    classes = _split_classes(result.get("class"))
    for name in class_name.split():
        if name not in classes:
            classes.append(name)
    result["class"] = " ".join(classes)
    return result


def render_attributes(attributes: Mapping[str, Any] | None) -> str:
    """Serialize attributes into a string suitable for an opening tag.

    ``None`` and ``False`` values are skipped, ``True`` renders a bare
    attribute, and sequences are joined with spaces. Values are escaped and
    quoted the way BeautifulSoup serializes attribute values.
    """
    parts: list[str] = []
    for name, value in (attributes or {}).items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
            continue
        if isinstance(value, (list, tuple)):
            value = " ".join(str(item) for item in value)
        quoted = EntitySubstitution.substitute_xml(str(value), make_quoted_attribute=True)
        parts.append(f" {name}={quoted}")
    return "".join(parts)


def wrap_element(tag_name: str, inner_html: str, attributes: Mapping[str, Any] | None = None) -> str:
    """Wrap ``inner_html`` in a ``tag_name`` element carrying ``attributes``."""
    return f"<{tag_name}{render_attributes(attributes)}>{inner_html}</{tag_name}>"


def _split_classes(value: Any) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return value.split()
    return [str(name) for name in value]
