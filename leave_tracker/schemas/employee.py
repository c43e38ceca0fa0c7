from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from leave_tracker.models.employee import Employee

# Every hour of a leap year
MAX_ALLOWANCE_HOURS = 24 * 366


class WeeklyHours(BaseModel):
    """Scheduled hours per weekday. Use 0 for non-working days."""
    mon: float = Field(0, ge=0, le=24)
    tue: float = Field(0, ge=0, le=24)
    wed: float = Field(0, ge=0, le=24)
    thu: float = Field(0, ge=0, le=24)
    fri: float = Field(0, ge=0, le=24)
    sat: float = Field(0, ge=0, le=24)
    sun: float = Field(0, ge=0, le=24)


class EmployeeCreate(BaseModel):
    branch_id: int
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field("", max_length=100)
    # Falls back to settings.default_allowance_hours
    allowed_holiday_hours: Optional[float] = Field(None, ge=0, le=MAX_ALLOWANCE_HOURS)
    weekly_hours: WeeklyHours = Field(default_factory=WeeklyHours)


class EmployeeUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    allowed_holiday_hours: Optional[float] = Field(None, ge=0, le=MAX_ALLOWANCE_HOURS)
    weekly_hours: Optional[WeeklyHours] = None


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    branch_id: int
    name: str
    first_name: str
    last_name: str
    allowed_holiday_hours: float
    is_active: bool
    weekly_hours: WeeklyHours

    @classmethod
    def from_employee(cls, employee: Employee) -> "EmployeeResponse":
        return cls(
            id=employee.id,
            branch_id=employee.branch_id,
            name=employee.full_name,
            first_name=employee.first_name,
            last_name=employee.last_name or "",
            allowed_holiday_hours=employee.allowed_holiday_hours or 0.0,
            is_active=employee.is_active,
            weekly_hours=WeeklyHours(**employee.weekly_pattern.as_dict()),
        )
