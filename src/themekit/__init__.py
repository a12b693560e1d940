"""themekit: presentation helpers for static-site themes."""

from themekit.colors import PALETTE, random_color
from themekit.dates import time_ago
from themekit.docs_tree import build_docs_tree, count_docs, format_docs_tree, format_title
from themekit.exceptions import HelperRegistrationError, ThemekitError
from themekit.html_utils import json_stringify, strip_tags, unique_id
from themekit.navigation import flatten_docs, get_doc_nav, is_current
from themekit.posts import get_category_path, has_cover
from themekit.schemas import CategoryLink, DocEntry, DocNav, DocNode, PageRecord, PostRecord
from themekit.text import excerpt, format_word_count, reading_time, word_count

__all__ = [
    "PALETTE",
    "CategoryLink",
    "DocEntry",
    "DocNav",
    "DocNode",
    "HelperRegistrationError",
    "PageRecord",
    "PostRecord",
    "ThemekitError",
    "build_docs_tree",
    "count_docs",
    "excerpt",
    "flatten_docs",
    "format_docs_tree",
    "format_title",
    "format_word_count",
    "get_category_path",
    "get_doc_nav",
    "has_cover",
    "is_current",
    "json_stringify",
    "random_color",
    "reading_time",
    "strip_tags",
    "time_ago",
    "unique_id",
    "word_count",
]
