"""Render a JSON menu definition to HTML for a given request URL."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

import httpx

from menukit import ItemList, RequestContext


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a JSON menu definition as nested HTML lists.")
    parser.add_argument("--url", help="URL to fetch the menu definition from")
    parser.add_argument("--file", help="Local JSON menu definition path")
    parser.add_argument("--current-url", help="URL of the request to highlight active items for")
    parser.add_argument("--prefix", help="Path prepended to relative link URLs")
    args = parser.parse_args()

    if not args.url and not args.file:
        parser.error("Provide --url or --file")

    definition = load_definition(url=args.url, file_path=args.file)
    request = RequestContext.from_url(args.current_url) if args.current_url else None
    menu = build_menu(definition, request=request, prefix=args.prefix)
    print(menu.render())


def load_definition(*, url: str | None, file_path: str | None) -> list[dict[str, Any]]:
    if url:
        response = httpx.get(url, follow_redirects=True, timeout=15.0)
        response.raise_for_status()
        return response.json()

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"Menu definition not found: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def build_menu(
    entries: list[dict[str, Any]],
    *,
    request: RequestContext | None = None,
    prefix: str | None = None,
) -> ItemList:
    """Build an ItemList from entries like ``{"url": ..., "label": ..., "children": [...]}``.

    Entries with a ``raw`` key become raw items instead of links.
    """
    menu = ItemList(request=request, prefix=prefix)
    for entry in entries:
        children = build_menu(entry["children"], prefix=prefix) if entry.get("children") else None
        if "raw" in entry:
            menu.raw(entry["raw"], children, entry.get("options"), attributes=entry.get("attributes"))
        else:
            menu.add(
                entry["url"],
                entry.get("label", entry["url"]),
                children,
                entry.get("options"),
                attributes=entry.get("attributes"),
            )
    return menu


if __name__ == "__main__":
    main()
