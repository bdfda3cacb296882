"""Test setup for dewey2md."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from dewey2md.tree import Element, find_content_root, parse_fragment  # noqa: E402


def section_page(body: str) -> str:
    """Wrap ``body`` the way the viewer wraps a section's content."""
    return (
        "<html><head><title>Section</title></head><body>"
        '<div id="toc">contents</div>'
        f'<div id="article_content">{body}</div>'
        "</body></html>"
    )


@pytest.fixture
def page() -> Callable[[str], str]:
    """Factory wrapping body markup into a full section page."""
    return section_page


@pytest.fixture
def make_root() -> Callable[[str], Element]:
    """Factory returning the parsed content root for body markup."""

    def _make(body: str) -> Element:
        return find_content_root(parse_fragment(section_page(body)))

    return _make
