"""Local configuration for themekit."""

from __future__ import annotations

import os


DEFAULT_DOCS_PREFIX = "docs/"
DEFAULT_DOC_EXTENSIONS = ".md"
DEFAULT_ORDER = 999
DEFAULT_READING_SPEED = 300
DEFAULT_EXCERPT_LENGTH = 200
DEFAULT_LOCALE = "en"
DEFAULT_ID_PREFIX = "id"

# Pages whose source starts with this prefix make up the documentation tree.
THEMEKIT_DOCS_PREFIX = os.getenv("THEMEKIT_DOCS_PREFIX", DEFAULT_DOCS_PREFIX)
THEMEKIT_DOC_EXTENSIONS = tuple(
    ext.strip()
    for ext in os.getenv("THEMEKIT_DOC_EXTENSIONS", DEFAULT_DOC_EXTENSIONS).split(",")
    if ext.strip()
)
THEMEKIT_DEFAULT_ORDER = int(os.getenv("THEMEKIT_DEFAULT_ORDER", str(DEFAULT_ORDER)))
THEMEKIT_READING_SPEED = int(os.getenv("THEMEKIT_READING_SPEED", str(DEFAULT_READING_SPEED)))
THEMEKIT_EXCERPT_LENGTH = int(os.getenv("THEMEKIT_EXCERPT_LENGTH", str(DEFAULT_EXCERPT_LENGTH)))
THEMEKIT_LOCALE = os.getenv("THEMEKIT_LOCALE", DEFAULT_LOCALE)
THEMEKIT_ID_PREFIX = os.getenv("THEMEKIT_ID_PREFIX", DEFAULT_ID_PREFIX)
