"""Print the docs tree a theme would build from a local source directory."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

from themekit.config import THEMEKIT_DOC_EXTENSIONS, THEMEKIT_DOCS_PREFIX
from themekit.docs_tree import build_docs_tree, count_docs, format_docs_tree

_FRONT_MATTER_RE = re.compile(r"\A---\s*\n(.*?)\n---\s*\n", re.DOTALL)
_FIELD_RE = re.compile(r"^(title|order)\s*:\s*(.*?)\s*$", re.MULTILINE)


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect the documentation tree built from page sources.")
    parser.add_argument("source", help="Site source directory (the one containing docs/)")
    parser.add_argument("--prefix", default=THEMEKIT_DOCS_PREFIX, help="Documentation source prefix")
    parser.add_argument("--paths", action="store_true", help="Show rendered paths next to titles")
    parser.add_argument("--order", action="store_true", help="Show each node's sort order")
    args = parser.parse_args()

    source_dir = Path(args.source)
    if not source_dir.is_dir():
        parser.error(f"Source directory not found: {source_dir}")

    pages = collect_pages(source_dir)
    tree = build_docs_tree(pages, prefix=args.prefix)

    print(f"Pages: {len(pages)}")
    print(f"Nodes: {count_docs(tree)}")
    print()
    print(format_docs_tree(tree, show_paths=args.paths, show_order=args.order))


def collect_pages(source_dir: Path) -> list[dict[str, object]]:
    pages: list[dict[str, object]] = []
    for file_path in sorted(source_dir.rglob("*")):
        if not file_path.is_file() or file_path.suffix not in THEMEKIT_DOC_EXTENSIONS:
            continue
        source = file_path.relative_to(source_dir).as_posix()
        page: dict[str, object] = {
            "source": source,
            "path": source[: -len(file_path.suffix)] + ".html",
        }
        page.update(read_front_matter(file_path.read_text(encoding="utf-8")))
        pages.append(page)
    return pages


def read_front_matter(text: str) -> dict[str, str]:
    match = _FRONT_MATTER_RE.match(text)
    if not match:
        return {}
    return {key: value.strip("'\"") for key, value in _FIELD_RE.findall(match.group(1))}


if __name__ == "__main__":
    main()
