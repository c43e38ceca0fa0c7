"""
Calendar date helpers.

All dates are plain calendar dates: no timezone is ever attached or converted.
Malformed input never raises here; parsing returns None and every helper built
on top of it degrades to an empty or zero result.
"""
import re
from datetime import date, datetime, timedelta
from typing import Any, List, Optional

_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def to_iso_date(value: date) -> str:
    """Format a calendar date as YYYY-MM-DD from its own year/month/day fields."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_iso_date(value: Any) -> Optional[date]:
    """
    Parse a YYYY-MM-DD string into a date.

    Returns None for anything that is not a well-formed, real calendar date
    (e.g. "2024-02-30", "2024-1-5", "", None). date and datetime instances
    are accepted as-is (datetimes are truncated to their date).
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    match = _ISO_DATE_RE.match(value.strip())
    if not match:
        return None

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def is_weekend(value: Any) -> bool:
    """True on Saturday or Sunday. Display only: it never zeroes scheduled hours."""
    parsed = parse_iso_date(value)
    if parsed is None:
        return False
    return parsed.weekday() >= 5


def each_day_inclusive(start: Any, end: Any) -> List[str]:
    """
    Enumerate every day from start to end, both included, as ISO strings.

    When start is after end the days are listed in descending order.
    Either bound being unparseable gives an empty list.
    """
    start_date = parse_iso_date(start)
    end_date = parse_iso_date(end)
    if start_date is None or end_date is None:
        return []

    direction = 1 if start_date <= end_date else -1
    span = abs((end_date - start_date).days)
    # Offsets stay within [start, end]; stepping past 9999-12-31 would overflow
    return [to_iso_date(start_date + timedelta(days=offset * direction)) for offset in range(span + 1)]


def year_of_iso(value: Any) -> int:
    """4-digit year prefix of an ISO date string, or 0 if there isn't one."""
    if isinstance(value, date):
        return value.year
    prefix = str(value or "")[:4]
    if len(prefix) != 4 or not prefix.isdigit():
        return 0
    return int(prefix)


def resolve_year(*values: Any, default: Optional[int] = None) -> int:
    """
    First usable year among the given ISO values.

    Falls back to `default`, then to the current calendar year, when none of
    the values carries a valid year prefix.
    """
    for value in values:
        year = year_of_iso(value)
        if year:
            return year
    if default:
        return default
    return date.today().year
