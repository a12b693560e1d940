"""Markup helpers shared by the template filters."""

from __future__ import annotations

import random
import re
import string

from pydantic_core import to_json

from themekit.config import THEMEKIT_ID_PREFIX

_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")
_BASE36_ALPHABET = string.digits + string.ascii_lowercase
_ID_TOKEN_LENGTH = 7


def strip_tags(html: str | None) -> str:
    """Remove anything that looks like a tag, keeping the text between."""
    if not html:
        return ""
    return _TAG_RE.sub("", html)


def collapse_whitespace(text: str, replacement: str = " ") -> str:
    """Replace every whitespace run with ``replacement`` and trim the ends."""
    return _WHITESPACE_RE.sub(replacement, text).strip()


def json_stringify(data: object) -> str:
    """Serialize ``data`` for embedding inside an inline ``<script>``.

    Output is compact JSON with non-ASCII characters left as-is and NaN or
    infinite floats written as ``null``. Angle brackets are escaped so a
    ``</script>`` inside a string value cannot end the enclosing element.
    Pydantic models, dates and other values known to pydantic are serialized
    natively; anything else is rendered with ``str``.
    """
    text = to_json(data, fallback=str, inf_nan_mode="null").decode("utf-8")
    return text.replace("<", "\\u003c").replace(">", "\\u003e")


def unique_id(prefix: str | None = None) -> str:
    """Return ``prefix`` joined to a short random base-36 token.

    The token is only meant for decorative DOM ids; collisions are possible.
    """
    token = "".join(random.choices(_BASE36_ALPHABET, k=_ID_TOKEN_LENGTH))
    return f"{prefix or THEMEKIT_ID_PREFIX}-{token}"
