"""
Leave-hours accrual engine.

Pure functions over plain data: weekly work patterns, leave records and
public-holiday lists in, rounded hour figures out. Nothing in this package
touches the database, settings or request state.
"""
from leave_tracker.accrual.dates import (
    each_day_inclusive,
    is_weekend,
    parse_iso_date,
    resolve_year,
    to_iso_date,
    year_of_iso,
)
from leave_tracker.accrual.hours import (
    WeeklyPattern,
    coerce_hours,
    holiday_date_set,
    public_holiday_hours_for_year,
    range_hours,
    round_hours,
    scheduled_hours,
)
from leave_tracker.accrual.balance import Balance, LeaveType, reconcile
from leave_tracker.accrual.calendar import CalendarDay, DayLeave, spread_leave_hours, year_calendar

__all__ = [
    "Balance",
    "CalendarDay",
    "DayLeave",
    "LeaveType",
    "WeeklyPattern",
    "coerce_hours",
    "each_day_inclusive",
    "holiday_date_set",
    "is_weekend",
    "parse_iso_date",
    "public_holiday_hours_for_year",
    "range_hours",
    "reconcile",
    "resolve_year",
    "round_hours",
    "scheduled_hours",
    "spread_leave_hours",
    "to_iso_date",
    "year_calendar",
]
