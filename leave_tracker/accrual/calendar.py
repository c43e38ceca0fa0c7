"""
Per-day views of an employee's year, for calendar screens.

Display data only. A leave record's stored total is spread evenly over its
days so a single date can show *some* hour figure; nothing here feeds back
into the balance.
"""
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from leave_tracker.accrual.balance import LeaveType
from leave_tracker.accrual.dates import each_day_inclusive, is_weekend, parse_iso_date, to_iso_date
from leave_tracker.accrual.hours import (
    WEEKDAY_KEYS,
    WeeklyPattern,
    coerce_hours,
    read_field,
    round_hours,
)

DEFAULT_HOLIDAY_NAME = "Public Holiday"


@dataclass(frozen=True)
class DayLeave:
    leave_type: LeaveType
    hours: float
    comment: str = ""


@dataclass(frozen=True)
class CalendarDay:
    date: str
    weekday: str
    is_weekend: bool
    is_public_holiday: bool
    holiday_name: Optional[str]
    scheduled_hours: float
    leave: Optional[DayLeave] = None


def spread_leave_hours(leave_records: Optional[Iterable[Any]]) -> Dict[str, DayLeave]:
    """
    Expand leave records into one entry per calendar day.

    Each day of a record gets `hours / number_of_days`. When records overlap,
    the later record in the input wins for the shared days. Records whose
    dates cannot be parsed are skipped.
    """
    days_map: Dict[str, DayLeave] = {}
    for record in leave_records or []:
        start = read_field(record, "start_date") or read_field(record, "date")
        end = read_field(record, "end_date") or start
        days = each_day_inclusive(start, end)
        if not days:
            continue

        leave_type = read_field(record, "leave_type") or read_field(record, "type")
        per_day = coerce_hours(read_field(record, "hours")) / len(days)
        entry = DayLeave(
            leave_type=LeaveType.parse(leave_type),
            hours=round_hours(per_day),
            comment=str(read_field(record, "comment") or ""),
        )
        for iso in days:
            days_map[iso] = entry
    return days_map


def _holiday_names(holidays: Optional[Iterable[Any]]) -> Dict[str, str]:
    names = {}
    for item in holidays or []:
        raw = item if isinstance(item, (str, date)) else read_field(item, "date")
        parsed = parse_iso_date(raw)
        if parsed is None:
            continue
        name = None if isinstance(item, (str, date)) else read_field(item, "name")
        names[to_iso_date(parsed)] = str(name or DEFAULT_HOLIDAY_NAME)
    return names


def year_calendar(
    year: Any,
    weekly_pattern: Any,
    holidays: Optional[Iterable[Any]],
    leave_records: Optional[Iterable[Any]],
) -> List[CalendarDay]:
    """One CalendarDay per date of `year`; empty for an unusable year."""
    try:
        first = date(int(year), 1, 1)
        last = date(int(year), 12, 31)
    except (TypeError, ValueError):
        return []

    pattern = WeeklyPattern.from_mapping(weekly_pattern)
    names = _holiday_names(holidays)
    leave_days = spread_leave_hours(leave_records)

    calendar_days = []
    for iso in each_day_inclusive(first, last):
        day = parse_iso_date(iso)
        is_holiday = iso in names
        calendar_days.append(
            CalendarDay(
                date=iso,
                weekday=WEEKDAY_KEYS[day.weekday()],
                is_weekend=is_weekend(day),
                is_public_holiday=is_holiday,
                holiday_name=names.get(iso),
                scheduled_hours=round_hours(pattern.hours_on(day)),
                leave=leave_days.get(iso),
            )
        )
    return calendar_days
