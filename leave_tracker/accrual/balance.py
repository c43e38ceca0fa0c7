"""
Leave types and the annual balance reconciliation.

`reconcile` is the one place "allowed vs. taken vs. remaining" is worked out.
It trusts the hours stored on each leave record and never re-derives them
from dates: the employee's pattern may have changed since the leave was
recorded, and the stored figure is the one that was agreed at submission.
"""
import enum
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Iterable, Optional

from leave_tracker.accrual.hours import coerce_hours, read_field, round_hours


class LeaveType(str, enum.Enum):
    ANNUAL = "ANNUAL"
    SICK = "SICK"
    UNPAID = "UNPAID"
    OTHER = "OTHER"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value: Any) -> "LeaveType":
        """
        Map any known spelling of a leave type onto the enumeration.

        Matching ignores case, underscores and extra whitespace, so "ANNUAL",
        "Holiday", "annual_leave" and "Sick Leave" all resolve. Unknown or
        missing values fall into OTHER.
        """
        if isinstance(value, cls):
            return value
        key = " ".join(str(value or "").replace("_", " ").lower().split())
        return _ALIASES.get(key, cls.OTHER)


_LABELS = {
    LeaveType.ANNUAL: "Holiday",
    LeaveType.SICK: "Sick Leave",
    LeaveType.UNPAID: "Unpaid",
    LeaveType.OTHER: "Other",
}

_ALIASES = {
    "annual": LeaveType.ANNUAL,
    "annual leave": LeaveType.ANNUAL,
    "holiday": LeaveType.ANNUAL,
    "holidays": LeaveType.ANNUAL,
    "vacation": LeaveType.ANNUAL,
    "sick": LeaveType.SICK,
    "sick leave": LeaveType.SICK,
    "sickness": LeaveType.SICK,
    "unpaid": LeaveType.UNPAID,
    "unpaid leave": LeaveType.UNPAID,
    "other": LeaveType.OTHER,
}


@dataclass(frozen=True)
class Balance:
    """An employee's leave figures for one year, in hours."""

    allowed_holiday: float
    total_taken: float
    taken_by_type: Dict[LeaveType, float]
    public_holiday_hours: float
    remaining_holiday: float

    @property
    def holiday_taken(self) -> float:
        return self.taken_by_type[LeaveType.ANNUAL]

    @property
    def sick_taken(self) -> float:
        return self.taken_by_type[LeaveType.SICK]

    @property
    def unpaid_taken(self) -> float:
        return self.taken_by_type[LeaveType.UNPAID]

    @property
    def other_taken(self) -> float:
        return self.taken_by_type[LeaveType.OTHER]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "allowed_holiday": self.allowed_holiday,
            "total_taken": self.total_taken,
            "holiday_taken": self.holiday_taken,
            "sick_taken": self.sick_taken,
            "unpaid_taken": self.unpaid_taken,
            "other_taken": self.other_taken,
            "taken_by_type": {t.value: hours for t, hours in self.taken_by_type.items()},
            "public_holiday_hours": self.public_holiday_hours,
            "remaining_holiday": self.remaining_holiday,
        }


def _record_type(record: Any) -> Any:
    value = read_field(record, "leave_type")
    if value is None:
        value = read_field(record, "type")
    return value


def reconcile(
    allowed_hours: Any,
    leave_records: Optional[Iterable[Any]],
    public_holiday_hours: Any,
) -> Balance:
    """
    Work out taken and remaining hours for one employee-year.

    Only ANNUAL leave and the year's public-holiday hours come off the
    allowance. Sick, unpaid and other leave are totalled for visibility but
    leave the holiday balance alone. The remaining figure is floored at 0.

    Args:
        allowed_hours: Annual holiday allowance in hours.
        leave_records: Records (mappings or objects) with `hours` and a
            `leave_type` or `type`; already filtered to the year by the caller.
        public_holiday_hours: Result of public_holiday_hours_for_year.

    Returns:
        A Balance with every figure rounded to 2 decimals.
    """
    allowed = coerce_hours(allowed_hours)
    holiday_deduction = coerce_hours(public_holiday_hours)

    taken: Dict[LeaveType, Decimal] = {leave_type: Decimal("0") for leave_type in LeaveType}
    for record in leave_records or []:
        leave_type = LeaveType.parse(_record_type(record))
        taken[leave_type] += coerce_hours(read_field(record, "hours"))

    total_taken = sum(taken.values(), Decimal("0"))
    remaining = max(Decimal("0"), allowed - taken[LeaveType.ANNUAL] - holiday_deduction)

    return Balance(
        allowed_holiday=round_hours(allowed),
        total_taken=round_hours(total_taken),
        taken_by_type={leave_type: round_hours(hours) for leave_type, hours in taken.items()},
        public_holiday_hours=round_hours(holiday_deduction),
        remaining_holiday=round_hours(remaining),
    )
