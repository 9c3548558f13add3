"""Test setup for fragedit."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from fragedit.html_parser import parse  # noqa: E402
from fragedit.nodes import Tree  # noqa: E402

DEMO_HTML = '<div><h1 class="foo">Hello, <i>world!</i></h1></div>'


@pytest.fixture
def demo_tree() -> Tree:
    """The demo fragment, freshly parsed."""
    return parse(DEMO_HTML)


@pytest.fixture
def list_html() -> str:
    """A small fragment with repeated siblings and surrounding whitespace."""
    return "\n<ul>\n  <li>Foo</li>\n  <li>Bar</li>\n  <li>Baz</li>\n</ul>\n"
