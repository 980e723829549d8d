"""Shared schemas for menukit."""

from menukit.schemas.options import RenderOptions, merge_options, replace_recursive

__all__ = ["RenderOptions", "merge_options", "replace_recursive"]
