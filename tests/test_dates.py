"""Tests for relative time formatting."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from themekit.dates import LOCALES, time_ago

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestTimeAgo:
    """Tests for time_ago function."""

    @pytest.mark.parametrize(
        ("delta", "expected"),
        [
            (timedelta(seconds=0), "just now"),
            (timedelta(seconds=59), "just now"),
            (timedelta(seconds=90), "1 minute ago"),
            (timedelta(minutes=45), "45 minutes ago"),
            (timedelta(hours=1), "1 hour ago"),
            (timedelta(hours=23, minutes=59), "23 hours ago"),
            (timedelta(days=1), "1 day ago"),
            (timedelta(days=29), "29 days ago"),
            (timedelta(days=30), "1 month ago"),
            (timedelta(days=364), "12 months ago"),
            (timedelta(days=365), "1 year ago"),
            (timedelta(days=400), "1 year ago"),
            (timedelta(days=800), "2 years ago"),
        ],
    )
    def test_buckets(self, delta: timedelta, expected: str) -> None:
        assert time_ago(NOW - delta, now=NOW, locale="en") == expected

    def test_chinese_labels(self) -> None:
        assert time_ago(NOW - timedelta(days=3), now=NOW, locale="zh") == "3 天前"
        assert time_ago(NOW, now=NOW, locale="zh") == "刚刚"

    def test_region_falls_back_to_language(self) -> None:
        assert time_ago(NOW - timedelta(hours=2), now=NOW, locale="zh-CN") == "2 小时前"

    def test_unknown_locale_uses_english(self) -> None:
        assert time_ago(NOW - timedelta(days=2), now=NOW, locale="tlh") == "2 days ago"

    def test_future_date_is_just_now(self) -> None:
        assert time_ago(NOW + timedelta(days=5), now=NOW, locale="en") == "just now"

    def test_parses_iso_strings(self) -> None:
        assert time_ago("2024-05-31T12:00:00+00:00", now=NOW, locale="en") == "1 day ago"
        assert time_ago("2024-05-31T12:00:00Z", now=NOW, locale="en") == "1 day ago"

    def test_accepts_timestamps(self) -> None:
        past = (NOW - timedelta(minutes=5)).timestamp()
        assert time_ago(past, now=NOW, locale="en") == "5 minutes ago"

    def test_accepts_dates(self) -> None:
        now = datetime(2024, 6, 1, 12, 0, 0)
        assert time_ago(date(2024, 5, 1), now=now, locale="en") == "1 month ago"

    def test_naive_value_against_aware_now(self) -> None:
        """Naive values are taken as UTC when compared with an aware now."""
        past = datetime(2024, 6, 1, 9, 0, 0)
        assert time_ago(past, now=NOW, locale="en") == "3 hours ago"

    def test_defaults_to_current_time(self) -> None:
        past = datetime.now(timezone.utc) - timedelta(days=10)
        assert time_ago(past, locale="en") == "10 days ago"

    @pytest.mark.parametrize("value", [None, "", "yesterday", object()])
    def test_unreadable_values_are_just_now(self, value: object) -> None:
        assert time_ago(value, now=NOW, locale="en") == "just now"  # type: ignore[arg-type]

    def test_locales_cover_every_unit(self) -> None:
        units = {"year", "month", "day", "hour", "minute"}
        for labels in LOCALES.values():
            assert set(labels.units) == units
