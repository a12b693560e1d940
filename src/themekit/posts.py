"""Helpers that read blog post records."""

from __future__ import annotations

from typing import Iterable

from themekit.schemas import CategoryLink, PostRecord, coerce_record


def get_category_path(categories: Iterable[object] | None) -> list[CategoryLink]:
    """Project categories onto ``name``/``path`` pairs, keeping their order."""
    links: list[CategoryLink] = []
    for raw_category in categories or ():
        link = coerce_record(CategoryLink, raw_category)
        if link is not None:
            links.append(link)
    return links


def has_cover(post: object) -> bool:
    """True when the post names a cover image."""
    record = coerce_record(PostRecord, post)
    return bool(record and record.cover and record.cover.strip())
