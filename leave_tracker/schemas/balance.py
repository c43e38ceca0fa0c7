from pydantic import BaseModel
from typing import List, Optional

from leave_tracker.accrual import Balance
from leave_tracker.models.employee import Employee
from leave_tracker.schemas.employee import WeeklyHours


class BalanceResponse(BaseModel):
    employee_id: int
    employee_name: str
    year: int
    allowed_holiday: float
    total_taken: float
    holiday_taken: float
    sick_taken: float
    unpaid_taken: float
    other_taken: float
    public_holiday_hours: float
    remaining_holiday: float

    @classmethod
    def from_balance(cls, employee: Employee, year: int, balance: Balance) -> "BalanceResponse":
        return cls(
            employee_id=employee.id,
            employee_name=employee.full_name,
            year=year,
            allowed_holiday=balance.allowed_holiday,
            total_taken=balance.total_taken,
            holiday_taken=balance.holiday_taken,
            sick_taken=balance.sick_taken,
            unpaid_taken=balance.unpaid_taken,
            other_taken=balance.other_taken,
            public_holiday_hours=balance.public_holiday_hours,
            remaining_holiday=balance.remaining_holiday,
        )


class DayLeaveResponse(BaseModel):
    leave_type: str
    hours: float
    comment: str = ""


class CalendarDayResponse(BaseModel):
    date: str
    weekday: str
    is_weekend: bool
    is_public_holiday: bool
    holiday_name: Optional[str] = None
    scheduled_hours: float
    leave: Optional[DayLeaveResponse] = None


class YearCalendarResponse(BaseModel):
    employee_id: int
    year: int
    weekly_hours: WeeklyHours
    days: List[CalendarDayResponse]
