"""Render options model and recursive option merging."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from menukit.config import MENUKIT_ACTIVE_CHILD_CLASS, MENUKIT_ACTIVE_CLASS
from menukit.exceptions import InvalidOptionsError


class RenderOptions(BaseModel):
    """Recognized render options for items and lists.

    Options accept both their Python names and their camelCase aliases
    (``activeClass``, ``activeChildClass``, ``renderDepth``). Unknown keys are
    kept as extras so that nested configuration survives merging.

    Attributes:
        active_class: CSS class added to an item whose link matches the request.
        active_child_class: CSS class added to an item with an active descendant.
        render_depth: Nesting level, used only to indent the rendered output.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    active_class: str = Field(default=MENUKIT_ACTIVE_CLASS, alias="activeClass")
    active_child_class: str = Field(default=MENUKIT_ACTIVE_CHILD_CLASS, alias="activeChildClass")
    render_depth: int = Field(default=0, ge=0, alias="renderDepth")


_ALIASES: dict[str, str] = {
    field.alias: name for name, field in RenderOptions.model_fields.items() if field.alias
}


def replace_recursive(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Replace values of ``base`` with those of ``overrides``, key by key.

    Nested mappings present on both sides are merged the same way instead of
    being replaced wholesale. Neither input is modified.
    """
    result = dict(base)
    for key, value in overrides.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = replace_recursive(current, value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def explicit_options(options: RenderOptions) -> dict[str, Any]:
    """Return only the options that were set explicitly, keyed by field name."""
    data = {
        name: copy.deepcopy(getattr(options, name))
        for name in options.model_fields_set
        if name in RenderOptions.model_fields
    }
    data.update(copy.deepcopy(options.model_extra or {}))
    return data


def merge_options(
    base: RenderOptions | None,
    overrides: Mapping[str, Any] | RenderOptions | None = None,
) -> RenderOptions:
    """Merge ``overrides`` recursively over ``base`` into a new RenderOptions.

    Raises:
        InvalidOptionsError: If ``overrides`` is not a mapping or the merged
            values fail validation.
    """
    current = explicit_options(base) if base is not None else {}
    if overrides is None:
        incoming: dict[str, Any] = {}
    elif isinstance(overrides, RenderOptions):
        incoming = explicit_options(overrides)
    elif isinstance(overrides, Mapping):
        incoming = {_ALIASES.get(key, key): value for key, value in overrides.items()}
    else:
        raise InvalidOptionsError(
            f"Render options must be a mapping, got {type(overrides).__name__}"
        )

    try:
        return RenderOptions.model_validate(replace_recursive(current, incoming))
    except ValidationError as exc:
        raise InvalidOptionsError(f"Invalid render options: {exc}") from exc
