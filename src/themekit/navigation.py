"""Previous/next navigation and current-path matching."""

from __future__ import annotations

from typing import Iterable

from themekit.schemas import DocEntry, DocNav, DocNode, coerce_record
from themekit.schemas.base import lenient_str

_INDEX_HTML = "index.html"


def flatten_docs(docs: Iterable[object] | None) -> list[DocEntry]:
    """Flatten a docs tree depth-first, keeping only page-backed nodes.

    Grouping nodes are not emitted but their children are still visited.
    """
    entries: list[DocEntry] = []
    for raw_node in docs or ():
        node = coerce_record(DocNode, raw_node)
        if node is not None:
            _collect_entries(node, entries)
    return entries


def get_doc_nav(docs: Iterable[object] | None, current_path: str | None) -> DocNav:
    """Find the pages before and after the current one.

    The current page is the first flattened entry whose path is contained in
    ``current_path``, so an earlier entry whose path is a substring of the
    current one wins over a later exact match.
    """
    entries = flatten_docs(docs)
    current = lenient_str(current_path)
    if not entries or not current:
        return DocNav()

    current_index = next(
        (index for index, entry in enumerate(entries) if entry.path in current),
        None,
    )
    if current_index is None:
        return DocNav()

    return DocNav(
        prev=entries[current_index - 1] if current_index > 0 else None,
        next=entries[current_index + 1] if current_index < len(entries) - 1 else None,
    )


def is_current(path: str | None, current_path: str | None) -> bool:
    """Check whether ``path`` is the current page or one of its ancestors.

    Args:
        path: Menu target such as ``/about`` or ``/``.
        current_path: Rendered path of the page being built.

    Returns:
        True when the normalized current path starts with the normalized
        target. The site root only matches the home page.
    """
    target = _trim_slashes(lenient_str(path) or "")
    current = _trim_slashes(lenient_str(current_path) or "")
    if current.endswith(_INDEX_HTML):
        current = current[: -len(_INDEX_HTML)]

    if target == "":
        return current in ("", _INDEX_HTML)

    return current.startswith(target)


def _collect_entries(node: DocNode, entries: list[DocEntry]) -> None:
    if node.path:
        entries.append(DocEntry(title=node.title, path=node.path, order=node.order))
    for child in node.children or ():
        _collect_entries(child, entries)


def _trim_slashes(value: str) -> str:
    if value.startswith("/"):
        value = value[1:]
    if value.endswith("/"):
        value = value[:-1]
    return value
