from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from leave_tracker.accrual import resolve_year
from leave_tracker.database import get_db
from leave_tracker.schemas.balance import BalanceResponse, CalendarDayResponse, YearCalendarResponse
from leave_tracker.schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from leave_tracker.services import balance_service, employee_service

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=List[EmployeeResponse])
def list_employees(branch_id: int = Query(...), db: Session = Depends(get_db)):
    return [EmployeeResponse.from_employee(e) for e in employee_service.list_employees(db, branch_id)]


@router.post("", response_model=EmployeeResponse, status_code=201)
def create_employee(data: EmployeeCreate, db: Session = Depends(get_db)):
    return EmployeeResponse.from_employee(employee_service.create_employee(db, data))


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(employee_id: int, db: Session = Depends(get_db)):
    return EmployeeResponse.from_employee(employee_service.get_employee(db, employee_id))


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(employee_id: int, data: EmployeeUpdate, db: Session = Depends(get_db)):
    return EmployeeResponse.from_employee(employee_service.update_employee(db, employee_id, data))


@router.delete("/{employee_id}")
def deactivate_employee(employee_id: int, db: Session = Depends(get_db)):
    employee_service.deactivate_employee(db, employee_id)
    return {"message": "Employee deactivated"}


@router.get("/{employee_id}/balance", response_model=BalanceResponse)
def get_employee_balance(
    employee_id: int,
    year: Optional[int] = Query(None, ge=1, le=9999),
    db: Session = Depends(get_db)
):
    """Allowed, taken and remaining holiday hours. Recomputed on every call."""
    year = resolve_year(default=year)
    employee = employee_service.get_employee(db, employee_id)
    balance = balance_service.employee_balance(db, employee, year)
    return BalanceResponse.from_balance(employee, year, balance)


@router.get("/{employee_id}/calendar", response_model=YearCalendarResponse)
def get_employee_calendar(
    employee_id: int,
    year: Optional[int] = Query(None, ge=1, le=9999),
    db: Session = Depends(get_db)
):
    year = resolve_year(default=year)
    employee = employee_service.get_employee(db, employee_id)
    days = balance_service.employee_year_calendar(db, employee, year)
    return YearCalendarResponse(
        employee_id=employee.id,
        year=year,
        weekly_hours=employee.weekly_pattern.as_dict(),
        days=[
            CalendarDayResponse(
                date=day.date,
                weekday=day.weekday,
                is_weekend=day.is_weekend,
                is_public_holiday=day.is_public_holiday,
                holiday_name=day.holiday_name,
                scheduled_hours=day.scheduled_hours,
                leave=None if day.leave is None else {
                    "leave_type": day.leave.leave_type.value,
                    "hours": day.leave.hours,
                    "comment": day.leave.comment,
                },
            )
            for day in days
        ],
    )
