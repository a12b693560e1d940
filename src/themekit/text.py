"""Word counts, reading time and excerpts for post content."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

from themekit.config import THEMEKIT_EXCERPT_LENGTH, THEMEKIT_READING_SPEED
from themekit.html_utils import collapse_whitespace, strip_tags

_ELLIPSIS = "..."
_TEN_THOUSAND_SUFFIX = "万"
_THOUSAND_SUFFIX = "k"
# Wide enough for every digit of the largest finite float.
_FIXED_CONTEXT = Context(prec=400)


def word_count(content: str | None) -> int:
    """Count the characters left once tags and all whitespace are removed."""
    if not content:
        return 0
    return len(collapse_whitespace(strip_tags(content), replacement=""))


def reading_time(content: str | None, words_per_minute: int | float | None = None) -> int:
    """Estimate reading time in whole minutes, rounded up."""
    if not content:
        return 0
    speed = words_per_minute if _is_positive_number(words_per_minute) else THEMEKIT_READING_SPEED
    return math.ceil(word_count(content) / speed)


def format_word_count(count: int | float | str | None) -> str:
    """Abbreviate a word count: ``12345`` -> ``1.2万``, ``1500`` -> ``1.5k``."""
    value = _as_number(count)
    if value >= 10000:
        return _to_fixed(value / 10000) + _TEN_THOUSAND_SUFFIX
    if value >= 1000:
        return _to_fixed(value / 1000) + _THOUSAND_SUFFIX
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def excerpt(content: str | None, length: int | None = None) -> str:
    """Plain-text excerpt of at most ``length`` characters plus an ellipsis."""
    if not content:
        return ""
    max_length = length if _is_positive_number(length) else THEMEKIT_EXCERPT_LENGTH
    text = collapse_whitespace(strip_tags(content))
    if len(text) <= max_length:
        return text
    return text[: int(max_length)] + _ELLIPSIS


def _to_fixed(value: float, digits: int = 1) -> str:
    # Halves round away from zero.
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_FIXED_CONTEXT))


def _as_number(value: object) -> int | float:
    if isinstance(value, bool) or value is None:
        return 0
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return 0
    if not math.isfinite(number):
        return 0
    return value if isinstance(value, int) else number


def _is_positive_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0
