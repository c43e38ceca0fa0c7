"""
Leave Service Layer

Turns a requested date range into a stored leave record. The hours are worked
out once, here, from the employee's current weekly pattern and the branch
region's public holidays; from then on the stored figure is the one every
balance uses.

Overlapping ranges for the same employee are not detected.
"""
from sqlalchemy.orm import Session
from datetime import date
from typing import List, Optional, Tuple
import logging

from leave_tracker.accrual import range_hours, resolve_year
from leave_tracker.core.exceptions import NoWorkingHoursError, NotFoundError
from leave_tracker.models.employee import Employee
from leave_tracker.models.leave_record import LeaveRecord
from leave_tracker.schemas.leave import LeaveCreate
from leave_tracker.services.branch_service import get_branch, holiday_region
from leave_tracker.services.employee_service import get_employee
from leave_tracker.services.holiday_service import holidays_between

logger = logging.getLogger(__name__)


def _ordered(start: date, end: date) -> Tuple[date, date]:
    return (start, end) if start <= end else (end, start)


def year_bounds(year: int) -> Tuple[date, date]:
    return date(year, 1, 1), date(year, 12, 31)


def compute_leave_hours(db: Session, employee: Employee, start: date, end: date) -> float:
    """Scheduled hours in [start, end] for this employee, public holidays excluded."""
    start, end = _ordered(start, end)
    holidays = holidays_between(db, start, end, holiday_region(employee.branch))
    return range_hours(start, end, employee.weekly_pattern, holidays)


def preview_leave_hours(db: Session, employee_id: int, start: date, end: date) -> Tuple[float, int]:
    """Hours a leave request would be stored with, and the year it counts toward."""
    employee = get_employee(db, employee_id)
    start, end = _ordered(start, end)
    hours = compute_leave_hours(db, employee, start, end)
    return hours, resolve_year(start, end)


def create_leave(db: Session, data: LeaveCreate) -> LeaveRecord:
    """
    Store a leave record with its computed hours.

    Raises:
        NotFoundError: unknown employee.
        NoWorkingHoursError: the range holds no scheduled working hours.
    """
    employee = get_employee(db, data.employee_id)
    start, end = _ordered(data.start_date, data.end_date)

    hours = compute_leave_hours(db, employee, start, end)
    if hours <= 0:
        logger.warning(
            f"Rejected leave for employee {employee.id}: no working hours",
            extra={"start_date": start.isoformat(), "end_date": end.isoformat()}
        )
        raise NoWorkingHoursError(start, end)

    comment = (data.comment or "").strip() or None
    record = LeaveRecord(
        branch_id=employee.branch_id,
        employee_id=employee.id,
        start_date=start,
        end_date=end,
        hours=hours,
        leave_type=data.leave_type.value,
        comment=comment,
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info(f"Recorded {hours}h {record.leave_type} leave for employee {employee.id}")
    return record


def leaves_for_year(db: Session, employee_id: int, year: int) -> List[LeaveRecord]:
    """Leave records that count toward `year` (their start date falls in it)."""
    first, last = year_bounds(year)
    return db.query(LeaveRecord).filter(
        LeaveRecord.employee_id == employee_id,
        LeaveRecord.start_date >= first,
        LeaveRecord.start_date <= last
    ).order_by(LeaveRecord.start_date.asc(), LeaveRecord.id.asc()).all()


def leaves_overlapping_year(db: Session, employee_id: int, year: int) -> List[LeaveRecord]:
    """Leave records with at least one day in `year`, for calendar display."""
    first, last = year_bounds(year)
    return db.query(LeaveRecord).filter(
        LeaveRecord.employee_id == employee_id,
        LeaveRecord.start_date <= last,
        LeaveRecord.end_date >= first
    ).order_by(LeaveRecord.start_date.asc(), LeaveRecord.id.asc()).all()


def list_leaves(
    db: Session,
    branch_id: int,
    year: Optional[int] = None,
    employee_id: Optional[int] = None
) -> List[LeaveRecord]:
    get_branch(db, branch_id)
    query = db.query(LeaveRecord).filter(LeaveRecord.branch_id == branch_id)
    if year:
        first, last = year_bounds(year)
        query = query.filter(LeaveRecord.start_date >= first, LeaveRecord.start_date <= last)
    if employee_id:
        query = query.filter(LeaveRecord.employee_id == employee_id)
    return query.order_by(LeaveRecord.start_date.desc(), LeaveRecord.id.desc()).all()


def delete_leave(db: Session, leave_id: int) -> None:
    record = db.get(LeaveRecord, leave_id)
    if not record:
        raise NotFoundError("Leave record", leave_id)
    db.delete(record)
    db.commit()
    logger.info(f"Deleted leave record {leave_id}")
