"""
Employee Service Layer

Creates and maintains employees together with their weekly schedule. The
schedule is stored as seven rows (ISO weekday 1..7) and is read back through
WeeklyPattern, so every hour figure goes through the same coercion.
"""
from sqlalchemy.orm import Session
from typing import List
import logging

from leave_tracker.accrual import WeeklyPattern
from leave_tracker.core.config import settings
from leave_tracker.core.exceptions import NotFoundError
from leave_tracker.models.employee import Employee, EmployeeSchedule
from leave_tracker.schemas.employee import EmployeeCreate, EmployeeUpdate, WeeklyHours
from leave_tracker.services.branch_service import get_branch

logger = logging.getLogger(__name__)


def _replace_schedule(employee: Employee, weekly_hours: WeeklyHours) -> None:
    pattern = WeeklyPattern.from_mapping(weekly_hours.model_dump())
    # Update rows in place: (employee_id, weekday) is unique
    existing = {row.weekday: row for row in employee.schedule}
    for weekday, hours in enumerate(pattern.as_dict().values(), start=1):
        row = existing.get(weekday)
        if row is None:
            employee.schedule.append(EmployeeSchedule(weekday=weekday, hours=hours))
        else:
            row.hours = hours


def list_employees(db: Session, branch_id: int) -> List[Employee]:
    """Active employees of a branch, ordered by last then first name."""
    get_branch(db, branch_id)
    return db.query(Employee).filter(
        Employee.branch_id == branch_id,
        Employee.is_active.is_(True)
    ).order_by(Employee.last_name.asc(), Employee.first_name.asc()).all()


def get_employee(db: Session, employee_id: int) -> Employee:
    employee = db.get(Employee, employee_id)
    if not employee:
        raise NotFoundError("Employee", employee_id)
    return employee


def create_employee(db: Session, data: EmployeeCreate) -> Employee:
    get_branch(db, data.branch_id)

    allowance = data.allowed_holiday_hours
    if allowance is None:
        allowance = settings.default_allowance_hours

    employee = Employee(
        branch_id=data.branch_id,
        first_name=data.first_name.strip(),
        last_name=data.last_name.strip(),
        allowed_holiday_hours=allowance,
        is_active=True,
    )
    _replace_schedule(employee, data.weekly_hours)
    db.add(employee)
    db.commit()
    db.refresh(employee)
    logger.info(f"Created employee {employee.id} in branch {employee.branch_id}")
    return employee


def update_employee(db: Session, employee_id: int, data: EmployeeUpdate) -> Employee:
    """
    Apply a partial update. A new weekly pattern replaces the old one for all
    dates; hours already stored on leave records are not touched.
    """
    employee = get_employee(db, employee_id)

    if data.first_name is not None:
        employee.first_name = data.first_name.strip()
    if data.last_name is not None:
        employee.last_name = data.last_name.strip()
    if data.allowed_holiday_hours is not None:
        employee.allowed_holiday_hours = data.allowed_holiday_hours
    if data.weekly_hours is not None:
        _replace_schedule(employee, data.weekly_hours)

    db.commit()
    db.refresh(employee)
    logger.info(f"Updated employee {employee_id}")
    return employee


def deactivate_employee(db: Session, employee_id: int) -> Employee:
    employee = get_employee(db, employee_id)
    employee.is_active = False
    db.commit()
    db.refresh(employee)
    logger.info(f"Deactivated employee {employee_id}")
    return employee
