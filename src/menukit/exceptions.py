"""Custom exceptions for menukit."""


class MenukitError(Exception):
    """Base exception for menukit operations."""


class InvalidOptionsError(MenukitError):
    """Render options are not a mapping or hold invalid values."""


class InvalidContentError(MenukitError):
    """Item content is not a Content instance."""


class InvalidChildrenError(MenukitError):
    """Item children are neither an ItemList nor empty."""
