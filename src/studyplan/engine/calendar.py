"""Whole-day calendar helpers."""

from __future__ import annotations

from datetime import date, datetime, timedelta


def to_date(value: str | date | datetime) -> date:
    """Truncate ``value`` to a calendar day.

    Strings are read as ISO dates or datetimes; the time of day is dropped.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()


def days_between(today: str | date | datetime, exam_date: str | date | datetime) -> int:
    """Return whole days from ``today`` to ``exam_date``; zero or negative when not ahead."""
    return (to_date(exam_date) - to_date(today)).days


def iter_days(first: date, count: int) -> list[date]:
    """Return ``count`` consecutive days starting at ``first``."""
    return [first + timedelta(days=offset) for offset in range(max(0, count))]
