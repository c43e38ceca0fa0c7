"""
Scheduled-hours resolution and hour totals over date ranges and holiday lists.

Hour values are carried as Decimal internally and rounded half-up to two
decimals only when a public function hands a figure back, so sums never pick
up binary floating point drift (7.5 + 7.5 + ... stays exact).
"""
from dataclasses import dataclass, fields
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional

from leave_tracker.accrual.dates import each_day_inclusive, parse_iso_date, to_iso_date, year_of_iso

_ZERO = Decimal("0")
_CENT = Decimal("0.01")
# Anything larger does not survive conversion to float
_MAX_ADJUSTED_EXPONENT = 307

# Index matches date.weekday(): Monday == 0
WEEKDAY_KEYS = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")


def coerce_hours(value: Any) -> Decimal:
    """
    Normalize a loosely typed hour value to a non-negative finite Decimal.

    Numbers, Decimals and numeric strings are accepted. None, booleans,
    unparseable strings, NaN/infinity, negative values and magnitudes too
    large for a float all become 0.
    """
    if value is None or isinstance(value, bool):
        return _ZERO
    if isinstance(value, Decimal):
        number = value
    else:
        try:
            number = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return _ZERO
    if not number.is_finite() or number < 0:
        return _ZERO
    if number and number.adjusted() > _MAX_ADJUSTED_EXPONENT:
        return _ZERO
    return number


def round_hours(value: Any) -> float:
    """Round an hour figure to 2 decimals, half-up on the third."""
    if not isinstance(value, Decimal):
        value = coerce_hours(value)
    with localcontext() as ctx:
        # quantize needs every integer digit plus two decimals in precision
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return float(value.quantize(_CENT, rounding=ROUND_HALF_UP))


def read_field(source: Any, key: str) -> Any:
    """Read `key` from a mapping or an attribute of any other object."""
    if isinstance(source, Mapping):
        return source.get(key)
    return getattr(source, key, None)


@dataclass(frozen=True)
class WeeklyPattern:
    """Scheduled hours per weekday, assumed valid for every date."""

    mon: Decimal = _ZERO
    tue: Decimal = _ZERO
    wed: Decimal = _ZERO
    thu: Decimal = _ZERO
    fri: Decimal = _ZERO
    sat: Decimal = _ZERO
    sun: Decimal = _ZERO

    @classmethod
    def from_mapping(cls, data: Any) -> "WeeklyPattern":
        """
        Build a pattern from a mapping (or any object) keyed mon..sun.

        Missing or invalid entries default to 0. An existing WeeklyPattern is
        returned unchanged; None gives an all-zero pattern.
        """
        if isinstance(data, WeeklyPattern):
            return data
        if data is None:
            return cls()
        return cls(**{key: coerce_hours(read_field(data, key)) for key in WEEKDAY_KEYS})

    @classmethod
    def from_schedule_rows(cls, rows: Optional[Iterable[Any]]) -> "WeeklyPattern":
        """
        Build a pattern from persisted schedule rows.

        Each row carries `weekday` as an ISO weekday (1 = Monday .. 7 = Sunday)
        and `hours`. Rows with an out-of-range weekday are ignored; a later row
        for the same weekday wins.
        """
        values: Dict[str, Decimal] = {}
        for row in rows or []:
            try:
                weekday = int(read_field(row, "weekday"))
            except (TypeError, ValueError):
                continue
            if 1 <= weekday <= 7:
                values[WEEKDAY_KEYS[weekday - 1]] = coerce_hours(read_field(row, "hours"))
        return cls(**values)

    def hours_on(self, day: date) -> Decimal:
        return getattr(self, WEEKDAY_KEYS[day.weekday()])

    @property
    def weekly_total(self) -> float:
        return round_hours(sum((getattr(self, f.name) for f in fields(self)), _ZERO))

    def as_dict(self) -> Dict[str, float]:
        return {key: round_hours(getattr(self, key)) for key in WEEKDAY_KEYS}


def _scheduled(day: Optional[date], pattern: WeeklyPattern) -> Decimal:
    if day is None:
        return _ZERO
    return pattern.hours_on(day)


def scheduled_hours(iso_date: Any, weekly_pattern: Any) -> float:
    """
    Hours the weekly pattern schedules on a single date, ignoring holidays.

    Weekends are not special: a pattern with 4h on Saturday yields 4 on every
    Saturday. An unparseable date yields 0.
    """
    pattern = WeeklyPattern.from_mapping(weekly_pattern)
    return round_hours(_scheduled(parse_iso_date(iso_date), pattern))


def _holiday_iso(item: Any) -> Optional[str]:
    if isinstance(item, (str, date)):
        raw = item
    else:
        raw = read_field(item, "date")
    parsed = parse_iso_date(raw)
    return to_iso_date(parsed) if parsed is not None else None


def holiday_date_set(holidays: Optional[Iterable[Any]]) -> FrozenSet[str]:
    """
    Normalize public holidays to a set of ISO date strings.

    Accepts ISO strings, date objects, mappings with a "date" key or objects
    with a `date` attribute, mixed freely. Invalid entries are dropped.
    """
    dates = set()
    for item in holidays or []:
        iso = _holiday_iso(item)
        if iso is not None:
            dates.add(iso)
    return frozenset(dates)


def range_hours(
    start: Any,
    end: Any,
    weekly_pattern: Any,
    public_holiday_dates: Optional[Iterable[Any]] = None,
) -> float:
    """
    Scheduled hours over an inclusive date range, skipping public holidays.

    This is the figure stored as a new leave record's `hours`. The result is
    never negative; an empty or unparseable range gives 0, and callers reject
    a submission when the range holds no working hours at all.

    Args:
        start: First day (ISO string or date).
        end: Last day (ISO string or date); may precede start.
        weekly_pattern: Mapping/object keyed mon..sun, or a WeeklyPattern.
        public_holiday_dates: Anything accepted by holiday_date_set.

    Returns:
        Total hours rounded to 2 decimals.
    """
    pattern = WeeklyPattern.from_mapping(weekly_pattern)
    holidays = holiday_date_set(public_holiday_dates)

    total = _ZERO
    for iso in each_day_inclusive(start, end):
        if iso in holidays:
            continue
        total += _scheduled(parse_iso_date(iso), pattern)
    return round_hours(total)


def _year_number(year: Any) -> int:
    """Integer year from an int, float, numeric string or ISO date; 0 if none."""
    if isinstance(year, bool):
        return 0
    try:
        return int(year)
    except (TypeError, ValueError, OverflowError):
        return year_of_iso(str(year).strip())


def public_holiday_hours_for_year(
    year: Any,
    weekly_pattern: Any,
    holidays: Optional[Iterable[Any]],
) -> float:
    """
    Scheduled hours that fall on public holidays across a whole year.

    Holidays are matched to the year by the 4-digit prefix of their ISO date,
    and each distinct date counts once. The figure covers the entire year,
    past and future days alike; it is not prorated by elapsed time.
    """
    pattern = WeeklyPattern.from_mapping(weekly_pattern)
    year_number = _year_number(year)
    if not 1 <= year_number <= 9999:
        return 0.0
    year_prefix = f"{year_number:04d}"

    total = _ZERO
    for iso in sorted(holiday_date_set(holidays)):
        if iso[:4] != year_prefix:
            continue
        total += _scheduled(parse_iso_date(iso), pattern)
    return round_hours(total)
