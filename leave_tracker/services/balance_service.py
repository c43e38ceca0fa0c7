"""
Balance Service Layer

Gathers an employee's records for a year and hands them to the accrual
engine. Balances are recomputed on every call and never stored.
"""
from sqlalchemy.orm import Session
from typing import List, Tuple

from leave_tracker.accrual import Balance, CalendarDay, public_holiday_hours_for_year, reconcile, year_calendar
from leave_tracker.models.employee import Employee
from leave_tracker.services.branch_service import holiday_region
from leave_tracker.services.employee_service import list_employees
from leave_tracker.services.holiday_service import list_holidays
from leave_tracker.services.leave_service import leaves_for_year, leaves_overlapping_year


def employee_balance(db: Session, employee: Employee, year: int) -> Balance:
    holidays = list_holidays(db, year, holiday_region(employee.branch))
    ph_hours = public_holiday_hours_for_year(year, employee.weekly_pattern, holidays)
    records = leaves_for_year(db, employee.id, year)
    return reconcile(employee.allowed_holiday_hours, records, ph_hours)


def branch_balances(db: Session, branch_id: int, year: int) -> List[Tuple[Employee, Balance]]:
    """Every active employee of the branch paired with their balance for `year`."""
    employees = list_employees(db, branch_id)
    return [(employee, employee_balance(db, employee, year)) for employee in employees]


def employee_year_calendar(db: Session, employee: Employee, year: int) -> List[CalendarDay]:
    holidays = list_holidays(db, year, holiday_region(employee.branch))
    # Leave spanning New Year shows on both years; balances still go by start date
    records = leaves_overlapping_year(db, employee.id, year)
    return year_calendar(year, employee.weekly_pattern, holidays, records)
