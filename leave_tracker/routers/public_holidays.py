from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from datetime import date
from typing import List, Optional

from leave_tracker.database import get_db
from leave_tracker.schemas.public_holiday import PublicHolidayCreate, PublicHolidayResponse
from leave_tracker.services import holiday_service

router = APIRouter(prefix="/public-holidays", tags=["public-holidays"])


@router.get("", response_model=List[PublicHolidayResponse])
def list_public_holidays(
    year: int = Query(..., ge=1, le=9999),
    region: Optional[str] = None,
    db: Session = Depends(get_db)
):
    return holiday_service.list_holidays(db, year, region)


@router.post("", response_model=PublicHolidayResponse)
def save_public_holiday(data: PublicHolidayCreate, db: Session = Depends(get_db)):
    """Create the holiday, or rename it if one already exists for that date and region."""
    return holiday_service.upsert_holiday(db, data)


@router.delete("")
def delete_public_holiday(
    holiday_date: date = Query(..., alias="date"),
    region: Optional[str] = None,
    db: Session = Depends(get_db)
):
    # Deleting a missing holiday is not an error
    deleted = holiday_service.delete_holiday(db, holiday_date, region)
    return {"message": "Public holiday deleted" if deleted else "Nothing to delete", "deleted": deleted}
