"""Build the documentation sidebar tree from site pages."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from themekit.config import (
    THEMEKIT_DEFAULT_ORDER,
    THEMEKIT_DOC_EXTENSIONS,
    THEMEKIT_DOCS_PREFIX,
)
from themekit.schemas import DocNode, PageRecord, coerce_record

logger = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(r"[-_]")
_WORD_START_RE = re.compile(r"\b\w", re.ASCII)
_INDEX_SUFFIX = "/index"


@dataclass
class _Branch:
    """Intermediate tree node keyed by path segment in its parent."""

    title: str | None = None
    path: str | None = None
    order: int | None = None
    children: dict[str, _Branch] = field(default_factory=dict)


def build_docs_tree(
    pages: Iterable[object] | None,
    *,
    prefix: str | None = None,
    extensions: Iterable[str] | None = None,
) -> list[DocNode]:
    """Group documentation pages into a sidebar tree.

    Only pages whose ``source`` starts with ``prefix`` take part. Each page's
    source is reduced to path segments (prefix, content extension and a
    trailing ``index`` removed) and merged into a shared tree, so pages with a
    common directory share a single grouping node.

    Args:
        pages: Site pages as mappings or attribute objects.
        prefix: Source prefix marking documentation pages. Defaults to
            ``THEMEKIT_DOCS_PREFIX``.
        extensions: Content-file extensions stripped from sources. Defaults
            to ``THEMEKIT_DOC_EXTENSIONS``.

    Returns:
        Top-level nodes sorted by ``order``; empty when no page matches.
    """
    doc_prefix = THEMEKIT_DOCS_PREFIX if prefix is None else prefix
    doc_extensions = THEMEKIT_DOC_EXTENSIONS if extensions is None else tuple(extensions)

    doc_pages: list[PageRecord] = []
    for raw_page in pages or ():
        page = coerce_record(PageRecord, raw_page)
        if page and page.source and page.source.startswith(doc_prefix):
            doc_pages.append(page)

    if not doc_pages:
        return []

    root = _Branch()
    for page in doc_pages:
        segments = _source_segments(page.source or "", doc_prefix, doc_extensions)
        if not segments:
            continue

        branch = root
        for segment in segments:
            branch = branch.children.setdefault(segment, _Branch())

        branch.title = page.title or segments[-1]
        branch.path = page.path
        branch.order = page.order

    nodes = _to_nodes(root.children)
    logger.debug("Built docs tree from %d pages (%d nodes)", len(doc_pages), count_docs(nodes))
    return nodes


def format_title(name: str) -> str:
    """Turn a kebab-case or snake_case segment into a display title."""
    spaced = _SEPARATOR_RE.sub(" ", name)
    return _WORD_START_RE.sub(lambda match: match.group(0).upper(), spaced)


def count_docs(nodes: Iterable[DocNode]) -> int:
    """Count every node in the tree, grouping nodes included."""
    return sum(1 + count_docs(node.children or ()) for node in nodes)


def format_docs_tree(
    nodes: Iterable[DocNode],
    *,
    show_paths: bool = False,
    show_order: bool = False,
) -> str:
    """Render the tree as an outline indented four spaces per level.

    ``show_order`` appends each node's sort order as ``#N`` and
    ``show_paths`` the rendered path of page-backed nodes, both inside
    parentheses after the title.
    """
    return "\n".join(_outline_lines(nodes, 0, show_paths=show_paths, show_order=show_order))


def _outline_lines(
    nodes: Iterable[DocNode], depth: int, *, show_paths: bool, show_order: bool
) -> Iterator[str]:
    for node in nodes:
        details: list[str] = []
        if show_order:
            details.append(f"#{node.order}")
        if show_paths and node.path:
            details.append(node.path)
        suffix = f" ({', '.join(details)})" if details else ""
        yield "    " * depth + node.title + suffix
        yield from _outline_lines(node.children or (), depth + 1, show_paths=show_paths, show_order=show_order)


def _source_segments(source: str, prefix: str, extensions: tuple[str, ...]) -> list[str]:
    relative = source[len(prefix):]
    for extension in extensions:
        if relative.endswith(extension):
            relative = relative[: -len(extension)]
            break
    # a/b/index describes the a/b directory itself
    if relative.endswith(_INDEX_SUFFIX):
        relative = relative[: -len(_INDEX_SUFFIX)]
    return [segment for segment in relative.split("/") if segment]


def _to_nodes(children: dict[str, _Branch]) -> list[DocNode]:
    nodes: list[DocNode] = []
    for segment, branch in children.items():
        child_nodes = _to_nodes(branch.children)
        nodes.append(
            DocNode(
                title=branch.title or format_title(segment),
                order=THEMEKIT_DEFAULT_ORDER if branch.order is None else branch.order,
                path=branch.path or None,
                children=child_nodes or None,
            )
        )
    nodes.sort(key=lambda node: node.order)
    return nodes
