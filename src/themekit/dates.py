"""Relative "time ago" formatting."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timezone

from themekit.config import THEMEKIT_LOCALE

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR

# Months and years are fixed 30/365-day spans, not calendar arithmetic.
_UNITS: tuple[tuple[str, int], ...] = (
    ("year", 365 * _DAY),
    ("month", 30 * _DAY),
    ("day", _DAY),
    ("hour", _HOUR),
    ("minute", _MINUTE),
)


@dataclass(frozen=True)
class TimeAgoLabels:
    """Templates for one locale, keyed by unit as ``(singular, plural)``."""

    units: dict[str, tuple[str, str]]
    just_now: str


LOCALES: dict[str, TimeAgoLabels] = {
    "en": TimeAgoLabels(
        units={
            "year": ("{n} year ago", "{n} years ago"),
            "month": ("{n} month ago", "{n} months ago"),
            "day": ("{n} day ago", "{n} days ago"),
            "hour": ("{n} hour ago", "{n} hours ago"),
            "minute": ("{n} minute ago", "{n} minutes ago"),
        },
        just_now="just now",
    ),
    "zh": TimeAgoLabels(
        units={
            "year": ("{n} 年前", "{n} 年前"),
            "month": ("{n} 个月前", "{n} 个月前"),
            "day": ("{n} 天前", "{n} 天前"),
            "hour": ("{n} 小时前", "{n} 小时前"),
            "minute": ("{n} 分钟前", "{n} 分钟前"),
        },
        just_now="刚刚",
    ),
}


def time_ago(
    value: datetime | date | str | int | float | None,
    *,
    now: datetime | None = None,
    locale: str | None = None,
) -> str:
    """Describe how long ago ``value`` was, e.g. ``"3 days ago"``.

    Args:
        value: A datetime, date, ISO-8601 string or POSIX timestamp.
        now: Reference time. Defaults to the current time, naive or aware to
            match ``value``.
        locale: Key into ``LOCALES``; region suffixes such as ``zh-CN`` fall
            back to their language. Defaults to ``THEMEKIT_LOCALE``.

    Returns:
        The largest whole unit elapsed. Missing, unparseable and future
        values all read as "just now".
    """
    labels = _labels_for(locale or THEMEKIT_LOCALE)
    past = _to_datetime(value)
    if past is None:
        return labels.just_now

    reference = now or (datetime.now(timezone.utc) if past.tzinfo else datetime.now())
    if (reference.tzinfo is None) != (past.tzinfo is None):
        reference, past = _assume_utc(reference), _assume_utc(past)

    elapsed = math.floor((reference - past).total_seconds())
    for unit, seconds in _UNITS:
        amount = elapsed // seconds
        if amount > 0:
            singular, plural = labels.units[unit]
            return (singular if amount == 1 else plural).format(n=amount)
    return labels.just_now


def _labels_for(locale: str) -> TimeAgoLabels:
    key = locale.lower().replace("_", "-")
    return LOCALES.get(key) or LOCALES.get(key.split("-")[0]) or LOCALES["en"]


def _to_datetime(value: object) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    return None


def _assume_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
