"""
Public Holiday Service Layer

Holidays are unique per (date, region). Callers that compute hours ask for a
region's holidays and hand the rows straight to the accrual engine.
"""
from sqlalchemy.orm import Session
from datetime import date
from typing import List, Optional
import logging

from leave_tracker.core.config import settings
from leave_tracker.core.exceptions import InvalidInputError
from leave_tracker.models.public_holiday import PublicHoliday
from leave_tracker.schemas.public_holiday import PublicHolidayCreate

logger = logging.getLogger(__name__)


def _region(region: Optional[str]) -> str:
    return (region or "").strip() or settings.default_holiday_region


def holidays_between(db: Session, start: date, end: date, region: Optional[str] = None) -> List[PublicHoliday]:
    if end < start:
        start, end = end, start
    return db.query(PublicHoliday).filter(
        PublicHoliday.region == _region(region),
        PublicHoliday.date >= start,
        PublicHoliday.date <= end
    ).order_by(PublicHoliday.date.asc()).all()


def list_holidays(db: Session, year: int, region: Optional[str] = None) -> List[PublicHoliday]:
    return holidays_between(db, date(year, 1, 1), date(year, 12, 31), region)


def upsert_holiday(db: Session, data: PublicHolidayCreate) -> PublicHoliday:
    name = data.name.strip()
    if not name:
        raise InvalidInputError("Holiday name is required")

    region = _region(data.region)
    holiday = db.query(PublicHoliday).filter(
        PublicHoliday.date == data.date,
        PublicHoliday.region == region
    ).first()

    if holiday:
        holiday.name = name
    else:
        holiday = PublicHoliday(date=data.date, name=name, region=region)
        db.add(holiday)

    db.commit()
    db.refresh(holiday)
    logger.info(f"Saved public holiday {holiday.date.isoformat()} ({region})")
    return holiday


def delete_holiday(db: Session, holiday_date: date, region: Optional[str] = None) -> bool:
    """Delete the holiday if present. Returns False when there was nothing to delete."""
    holiday = db.query(PublicHoliday).filter(
        PublicHoliday.date == holiday_date,
        PublicHoliday.region == _region(region)
    ).first()
    if not holiday:
        return False
    db.delete(holiday)
    db.commit()
    logger.info(f"Deleted public holiday {holiday_date.isoformat()} ({_region(region)})")
    return True
