"""Calendar arithmetic for ledger dates and report buckets.

All ledger timestamps are UTC. A naive datetime is read as UTC.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone

ONE_DAY = timedelta(days=1)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def as_date(value: date | datetime) -> date:
    """Drop the time of day. Aware datetimes are converted to UTC first."""
    if isinstance(value, datetime):
        return as_utc(value).date()
    return value


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def next_day(day: date) -> date:
    return day + ONE_DAY


def add_months(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def next_month(key: tuple[int, int]) -> tuple[int, int]:
    return add_months(key[0], key[1], 1)
