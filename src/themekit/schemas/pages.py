"""Host page, post and category records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from themekit.schemas.base import lenient_int, lenient_str


class PageRecord(BaseModel):
    """A site page as exposed by the host.

    Attributes:
        source: Slash-delimited source path relative to the site source,
            e.g. ``docs/golang/basics.md``.
        path: Rendered output path.
        title: Optional page title from front matter.
        order: Optional sort order from front matter.
    """

    model_config = ConfigDict(extra="ignore", from_attributes=True)

    source: str | None = None
    path: str | None = None
    title: str | None = None
    order: int | None = None

    @field_validator("source", "path", "title", mode="before")
    @classmethod
    def _coerce_text(cls, value: object) -> str | None:
        return lenient_str(value)

    @field_validator("order", mode="before")
    @classmethod
    def _coerce_order(cls, value: object) -> int | None:
        return lenient_int(value)


class PostRecord(BaseModel):
    """The cover image field of a blog post."""

    model_config = ConfigDict(extra="ignore", from_attributes=True)

    cover: str | None = None

    @field_validator("cover", mode="before")
    @classmethod
    def _coerce_text(cls, value: object) -> str | None:
        if isinstance(value, str):
            return value
        return None


class CategoryLink(BaseModel):
    """A category reduced to what a breadcrumb needs."""

    model_config = ConfigDict(extra="ignore", from_attributes=True)

    name: str | None = None
    path: str | None = None

    @field_validator("name", "path", mode="before")
    @classmethod
    def _coerce_text(cls, value: object) -> str | None:
        return lenient_str(value)
