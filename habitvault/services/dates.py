import calendar
from datetime import date, datetime, timedelta
from typing import Iterator, Optional
from zoneinfo import ZoneInfo

from habitvault.config import settings

WEEK_START = 1  # Monday, in Sunday-first numbering


def today_local(tz_name: Optional[str] = None) -> date:
    return datetime.now(ZoneInfo(tz_name or settings.APP_TIMEZONE)).date()


def weekday_index(value: date) -> int:
    """Sunday-first weekday number (0 = Sunday .. 6 = Saturday)."""
    return (value.weekday() + 1) % 7


def iter_days(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def sub_months(value: date, months: int) -> date:
    month_index = value.year * 12 + (value.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def week_bounds(value: date) -> tuple[date, date]:
    start = value - timedelta(days=(weekday_index(value) - WEEK_START) % 7)
    return start, start + timedelta(days=6)


def month_bounds(value: date) -> tuple[date, date]:
    last_day = calendar.monthrange(value.year, value.month)[1]
    return value.replace(day=1), value.replace(day=last_day)


def year_bounds(value: date) -> tuple[date, date]:
    return date(value.year, 1, 1), date(value.year, 12, 31)


def round_percent(part: int, whole: int) -> int:
    if whole <= 0:
        return 0
    # Half-up, not banker's rounding.
    return int((part * 100) / whole + 0.5)
