"""Bind the helpers into a Jinja2 environment."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable

from jinja2 import Environment, pass_context, select_autoescape
from jinja2.runtime import Context
from markupsafe import Markup

from themekit.colors import random_color
from themekit.dates import time_ago
from themekit.docs_tree import build_docs_tree
from themekit.exceptions import HelperRegistrationError
from themekit.html_utils import json_stringify, unique_id
from themekit.navigation import get_doc_nav, is_current
from themekit.posts import get_category_path, has_cover
from themekit.schemas import DocNav, DocNode, PageRecord, coerce_record
from themekit.text import excerpt, format_word_count, reading_time, word_count

logger = logging.getLogger(__name__)


def _safe_json(data: object) -> Markup:
    # json_stringify already escapes angle brackets.
    return Markup(json_stringify(data))


@pass_context
def _docs_tree(context: Context, pages: object = None) -> list[DocNode]:
    if pages is None:
        pages = _lookup(context.get("site"), "pages")
    return build_docs_tree(pages)  # type: ignore[arg-type]


@pass_context
def _doc_nav(context: Context, docs: object, current_path: str | None = None) -> DocNav:
    if current_path is None:
        current_path = _current_path(context)
    return get_doc_nav(docs, current_path)  # type: ignore[arg-type]


@pass_context
def _is_current(context: Context, path: str | None) -> bool:
    return is_current(path, _current_path(context))


FILTERS: dict[str, Callable[..., Any]] = {
    "word_count": word_count,
    "reading_time": reading_time,
    "format_word_count": format_word_count,
    "excerpt": excerpt,
    "time_ago": time_ago,
    "json_stringify": _safe_json,
    "random_color": random_color,
    "category_path": get_category_path,
    "has_cover": has_cover,
}

GLOBALS: dict[str, Callable[..., Any]] = {
    "docs_tree": _docs_tree,
    "doc_nav": _doc_nav,
    "is_current": _is_current,
    "unique_id": unique_id,
}


def register_helpers(env: Environment, *, overwrite: bool = True) -> Environment:
    """Install the theme helpers as filters and globals on ``env``.

    Args:
        env: The environment templates are rendered with.
        overwrite: When False, refuse to replace an existing filter or global
            of the same name.

    Returns:
        The same environment, for chaining.

    Raises:
        HelperRegistrationError: If ``overwrite`` is False and a name is taken.
            Nothing is registered in that case.
    """
    if not overwrite:
        taken = sorted(
            [f"filter '{name}'" for name in FILTERS if name in env.filters]
            + [f"global '{name}'" for name in GLOBALS if name in env.globals]
        )
        if taken:
            raise HelperRegistrationError(f"Already registered: {', '.join(taken)}")

    env.filters.update(FILTERS)
    env.globals.update(GLOBALS)
    logger.debug("Registered %d filters and %d globals", len(FILTERS), len(GLOBALS))
    return env


def create_environment(**kwargs: Any) -> Environment:
    """Create an autoescaping ``Environment`` with the helpers registered."""
    kwargs.setdefault("autoescape", select_autoescape())
    return register_helpers(Environment(**kwargs))


def _current_path(context: Context) -> str | None:
    page = coerce_record(PageRecord, context.get("page"))
    return page.path if page else None


def _lookup(container: object, name: str) -> object:
    if isinstance(container, Mapping):
        return container.get(name)
    return getattr(container, name, None)
