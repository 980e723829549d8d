"""Test setup for menukit."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from menukit.request import RequestContext  # noqa: E402


@pytest.fixture
def request_context() -> RequestContext:
    """Request for http://example.com/about with a query string."""
    return RequestContext.from_url("http://example.com/about?page=2")
