from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import date, datetime
from typing import Optional

from leave_tracker.accrual import LeaveType


class LeavePreviewRequest(BaseModel):
    employee_id: int
    start_date: date
    end_date: date


class LeavePreviewResponse(BaseModel):
    employee_id: int
    start_date: date
    end_date: date
    hours: float
    year: int


class LeaveCreate(BaseModel):
    employee_id: int
    start_date: date
    end_date: date
    leave_type: LeaveType = LeaveType.ANNUAL
    comment: Optional[str] = Field(None, max_length=500)

    @field_validator("leave_type", mode="before")
    @classmethod
    def normalize_leave_type(cls, value):
        # Accepts display spellings ("Holiday", "Sick Leave") as well as stored ones
        return LeaveType.parse(value)


class LeaveRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    branch_id: int
    employee_id: int
    start_date: date
    end_date: date
    hours: float
    leave_type: str
    comment: Optional[str] = None
    created_at: Optional[datetime] = None
