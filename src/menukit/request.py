"""Request context used to decide which menu items are active."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict


class RequestContext(BaseModel):
    """The URL of the request a menu is being rendered for.

    Attributes:
        full_url: Absolute URL of the current request, including the query string.
        url: Absolute URL of the current request without the query string.
    """

    model_config = ConfigDict(frozen=True)

    full_url: str
    url: str

    @classmethod
    def from_url(cls, full_url: str) -> RequestContext:
        """Build a context from a request URL, splitting off its query string."""
        parsed = httpx.URL(full_url)
        return cls(
            full_url=str(parsed.copy_with(fragment=None)),
            url=str(parsed.copy_with(query=None, fragment=None)),
        )

    @classmethod
    def from_request(cls, request: Any) -> RequestContext:
        """Build a context from a web framework request exposing ``url``.

        Works with Starlette and FastAPI ``Request`` objects, or anything else
        whose ``url`` attribute renders to an absolute URL.
        """
        url = getattr(request, "url", None)
        if url is None:
            raise TypeError(f"{type(request).__name__} does not expose a request URL")
        return cls.from_url(str(url))

    @property
    def root_url(self) -> str:
        """Scheme and host of the request, with an empty path."""
        return str(httpx.URL(self.url).copy_with(path="/", query=None, fragment=None))

    def resolve(self, url: str) -> str:
        """Resolve a relative URL against the request root; absolute URLs pass through."""
        return str(httpx.URL(self.root_url).join(url))
