from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from leave_tracker.database import get_db
from leave_tracker.schemas.leave import (
    LeaveCreate,
    LeavePreviewRequest,
    LeavePreviewResponse,
    LeaveRecordResponse,
)
from leave_tracker.services import leave_service

router = APIRouter(prefix="/leaves", tags=["leaves"])


@router.post("/preview", response_model=LeavePreviewResponse)
def preview_leave(request: LeavePreviewRequest, db: Session = Depends(get_db)):
    """Hours the range would be recorded with. Nothing is stored."""
    hours, year = leave_service.preview_leave_hours(db, request.employee_id, request.start_date, request.end_date)
    start, end = sorted((request.start_date, request.end_date))
    return LeavePreviewResponse(employee_id=request.employee_id, start_date=start, end_date=end, hours=hours, year=year)


@router.post("", response_model=LeaveRecordResponse, status_code=201)
def create_leave(data: LeaveCreate, db: Session = Depends(get_db)):
    return leave_service.create_leave(db, data)


@router.get("", response_model=List[LeaveRecordResponse])
def list_leaves(
    branch_id: int = Query(...),
    year: Optional[int] = Query(None, ge=1, le=9999),
    employee_id: Optional[int] = None,
    db: Session = Depends(get_db)
):
    return leave_service.list_leaves(db, branch_id, year=year, employee_id=employee_id)


@router.delete("/{leave_id}")
def delete_leave(leave_id: int, db: Session = Depends(get_db)):
    leave_service.delete_leave(db, leave_id)
    return {"message": "Leave record deleted"}
