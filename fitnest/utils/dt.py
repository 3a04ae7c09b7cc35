"""Datetime helpers.

Everything is stored and compared as naive UTC, which is what SQLite hands
back. Aware values are converted before they reach the database.
"""

from datetime import date, datetime, time, timedelta, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(dt: "datetime | None") -> "datetime | None":
    """Convert an aware datetime to naive UTC. Naive values pass through."""
    if dt is None or dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def start_of_day(day: "date | datetime | None" = None) -> datetime:
    """Midnight at the start of ``day`` (today in UTC when omitted)."""
    if day is None:
        day = utcnow()
    if isinstance(day, datetime):
        day = to_naive_utc(day).date()
    return datetime.combine(day, time.min)


def day_window(day: "date | datetime | None" = None) -> tuple[datetime, datetime]:
    """Half-open [start, end) window covering one calendar day."""
    start = start_of_day(day)
    return start, start + timedelta(days=1)
