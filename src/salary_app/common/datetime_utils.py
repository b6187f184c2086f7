from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Optional, Tuple


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 datetime (a bare date means midnight)."""
    if len(value) == 10:
        return datetime.combine(parse_iso_date(value), datetime.min.time())
    return datetime.fromisoformat(value)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def month_bounds(day: date) -> Tuple[date, date]:
    """First and last day of the month containing ``day``."""
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


def iso_or_none(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value else None
