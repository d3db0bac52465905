"""Three-way comparators behind the ``date`` and ``datetime`` match types."""

from __future__ import annotations

import datetime
from typing import Any


def parse_date_value(value: Any) -> datetime.datetime | None:
    """
    Read *value* as a ``datetime``.

    Accepts ``datetime`` and ``date`` instances and ISO-8601 strings
    (a trailing ``Z`` is read as UTC). A bare date becomes midnight.
    Returns ``None`` when the value is not a date.
    """
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time.min)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return datetime.datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


def _sign(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def compare_dates(value: Any, other: Any) -> int | None:
    """
    Compare the calendar dates of two values, ignoring the time of day.

    Returns a negative, zero or positive number, or ``None`` if either
    side is not a date.
    """
    left = parse_date_value(value)
    right = parse_date_value(other)
    if left is None or right is None:
        return None
    return _sign(left.date(), right.date())


def _as_aware(value: datetime.datetime) -> datetime.datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value


def compare_timestamps(value: Any, other: Any) -> int | None:
    """
    Compare two values as instants in time.

    Naive values are read as UTC. Returns ``None`` if either side is not
    a date.
    """
    left = parse_date_value(value)
    right = parse_date_value(other)
    if left is None or right is None:
        return None
    return _sign(_as_aware(left), _as_aware(right))
