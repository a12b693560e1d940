"""Shared schemas for themekit."""

from themekit.schemas.base import coerce_record
from themekit.schemas.docs import DocEntry, DocNav, DocNode
from themekit.schemas.pages import CategoryLink, PageRecord, PostRecord

__all__ = [
    "CategoryLink",
    "DocEntry",
    "DocNav",
    "DocNode",
    "PageRecord",
    "PostRecord",
    "coerce_record",
]
