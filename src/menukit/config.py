"""Local configuration for menukit."""

from __future__ import annotations

import os


DEFAULT_ACTIVE_CLASS = "active"
DEFAULT_ACTIVE_CHILD_CLASS = "active-child"
DEFAULT_ITEM_ELEMENT = "li"
DEFAULT_LIST_ELEMENT = "ul"

MENUKIT_ACTIVE_CLASS = os.getenv("MENUKIT_ACTIVE_CLASS", DEFAULT_ACTIVE_CLASS)
MENUKIT_ACTIVE_CHILD_CLASS = os.getenv("MENUKIT_ACTIVE_CHILD_CLASS", DEFAULT_ACTIVE_CHILD_CLASS)
MENUKIT_ITEM_ELEMENT = os.getenv("MENUKIT_ITEM_ELEMENT", DEFAULT_ITEM_ELEMENT)
MENUKIT_LIST_ELEMENT = os.getenv("MENUKIT_LIST_ELEMENT", DEFAULT_LIST_ELEMENT)

# Indentation unit used for every nesting level of rendered output.
INDENT = "\t"
