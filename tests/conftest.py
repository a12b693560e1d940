"""Test setup for themekit."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def doc_pages() -> list[dict[str, object]]:
    """A small site: two doc sections, a docs landing page and a blog page."""
    return [
        {"source": "about/index.md", "path": "about/index.html", "title": "About"},
        {"source": "docs/index.md", "path": "docs/index.html", "title": "Overview", "order": 0},
        {"source": "docs/golang/index.md", "path": "docs/golang/index.html", "title": "Go", "order": 2},
        {"source": "docs/golang/basics.md", "path": "docs/golang/basics.html", "title": "Basics", "order": 1},
        {"source": "docs/golang/concurrency.md", "path": "docs/golang/concurrency.html", "order": 2},
        {"source": "docs/python-tips/decorators.md", "path": "docs/python-tips/decorators.html", "order": 1},
    ]
