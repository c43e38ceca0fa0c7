from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from leave_tracker.accrual import resolve_year
from leave_tracker.database import get_db
from leave_tracker.schemas.balance import BalanceResponse
from leave_tracker.schemas.branch import BranchCreate, BranchResponse
from leave_tracker.services import balance_service, branch_service

router = APIRouter(prefix="/branches", tags=["branches"])


@router.get("", response_model=List[BranchResponse])
def list_branches(db: Session = Depends(get_db)):
    return branch_service.list_branches(db)


@router.post("", response_model=BranchResponse, status_code=201)
def create_branch(data: BranchCreate, db: Session = Depends(get_db)):
    return branch_service.create_branch(db, data)


@router.delete("/{branch_id}")
def delete_branch(branch_id: int, db: Session = Depends(get_db)):
    branch_service.delete_branch(db, branch_id)
    return {"message": "Branch deleted"}


@router.get("/{branch_id}/balances", response_model=List[BalanceResponse])
def list_branch_balances(
    branch_id: int,
    year: Optional[int] = Query(None, ge=1, le=9999),
    db: Session = Depends(get_db)
):
    """Holiday balance of every active employee in the branch."""
    year = resolve_year(default=year)
    return [
        BalanceResponse.from_balance(employee, year, balance)
        for employee, balance in balance_service.branch_balances(db, branch_id, year)
    ]
