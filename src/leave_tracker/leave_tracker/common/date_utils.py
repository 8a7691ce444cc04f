from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator

from ..core.exceptions import ValidationError

ISO_FORMAT = "%Y-%m-%d"


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(str(value or "").strip(), ISO_FORMAT).date()
    except ValueError:
        raise ValidationError(f"Invalid date {value!r} (expected YYYY-MM-DD)")


def to_iso(value: date) -> str:
    return value.strftime(ISO_FORMAT)


def normalize_iso(value: str) -> str:
    """Round-trip a date string so lexicographic comparison stays chronological."""
    return to_iso(parse_iso_date(value))


def today_local() -> date:
    """Current local calendar date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def today() -> str:
    return to_iso(today_local())


def days_between_inclusive(a: str, b: str) -> int:
    """Inclusive day count: both endpoints are leave days."""
    delta = parse_iso_date(b) - parse_iso_date(a)
    return abs(delta.days) + 1


def iter_days(end: str, count: int) -> Iterator[str]:
    """Yield `count` calendar dates ending at `end`, oldest first."""
    last = parse_iso_date(end)
    for offset in range(count - 1, -1, -1):
        yield to_iso(last - timedelta(days=offset))


def format_display(value: str) -> str:
    d = parse_iso_date(value)
    return f"{d.strftime('%b')} {d.day}, {d.year}"
