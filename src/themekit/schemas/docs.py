"""Documentation tree and navigation models."""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
)

from themekit.config import THEMEKIT_DEFAULT_ORDER
from themekit.schemas.base import lenient_int, lenient_str

# Grouping nodes have no path and leaves have no children.
_OPTIONAL_KEYS = ("path", "children")


class DocNode(BaseModel):
    """A node of the documentation sidebar tree.

    ``path`` is only set for nodes backed by a real page; grouping nodes
    built from intermediate directories leave it as ``None``. ``children``
    is ``None`` rather than an empty list so serialized leaves omit it.
    """

    model_config = ConfigDict(extra="ignore", from_attributes=True)

    title: str = ""
    order: int = THEMEKIT_DEFAULT_ORDER
    path: str | None = None
    children: list["DocNode"] | None = None

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: object) -> str:
        return lenient_str(value) or ""

    @field_validator("order", mode="before")
    @classmethod
    def _coerce_order(cls, value: object) -> int:
        order = lenient_int(value)
        return THEMEKIT_DEFAULT_ORDER if order is None else order

    @field_validator("path", mode="before")
    @classmethod
    def _coerce_path(cls, value: object) -> str | None:
        return lenient_str(value)

    @field_validator("children", mode="before")
    @classmethod
    def _coerce_children(cls, value: object) -> object:
        if not value:
            return None
        return value

    @model_serializer(mode="wrap")
    def _omit_missing(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for key in _OPTIONAL_KEYS:
            if key in data and data[key] is None:
                del data[key]
        return data


class DocEntry(BaseModel):
    """A page-backed tree node without its children."""

    title: str
    path: str
    order: int = THEMEKIT_DEFAULT_ORDER


class DocNav(BaseModel):
    """Previous/next links around the current documentation page."""

    prev: DocEntry | None = None
    next: DocEntry | None = None
