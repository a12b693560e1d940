"""Tests for post record helpers."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from themekit.posts import get_category_path, has_cover
from themekit.schemas import CategoryLink


class TestGetCategoryPath:
    """Tests for get_category_path function."""

    def test_projects_name_and_path_in_order(self) -> None:
        categories = [
            {"name": "Tech", "path": "categories/tech/", "length": 12},
            SimpleNamespace(name="Go", path="categories/tech/go/", parent="tech"),
        ]

        links = get_category_path(categories)

        assert links == [
            CategoryLink(name="Tech", path="categories/tech/"),
            CategoryLink(name="Go", path="categories/tech/go/"),
        ]

    def test_extra_fields_are_dropped(self) -> None:
        links = get_category_path([{"name": "Tech", "path": "t/", "length": 3}])
        assert links[0].model_dump() == {"name": "Tech", "path": "t/"}

    @pytest.mark.parametrize("categories", [None, []])
    def test_empty(self, categories: object) -> None:
        assert get_category_path(categories) == []  # type: ignore[arg-type]


class TestHasCover:
    """Tests for has_cover function."""

    @pytest.mark.parametrize(
        ("post", "expected"),
        [
            ({"cover": "/img/cover.png"}, True),
            (SimpleNamespace(cover="cover.jpg", title="Post"), True),
            ({"cover": "c.png", "categories": 5, "content": object(), "date": "not a date"}, True),
            ({"cover": "   "}, False),
            ({"cover": ""}, False),
            ({"cover": None}, False),
            ({"cover": 42}, False),
            ({"title": "No cover"}, False),
            (None, False),
        ],
    )
    def test_detects_cover(self, post: object, expected: bool) -> None:
        assert has_cover(post) is expected
