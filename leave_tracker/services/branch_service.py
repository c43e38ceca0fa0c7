"""
Branch Service Layer

Branches own employees and leave records. A branch's `region` decides which
public holidays apply to its staff.
"""
from sqlalchemy.orm import Session
from typing import List
import logging

from leave_tracker.core.config import settings
from leave_tracker.core.exceptions import ConflictError, NotFoundError
from leave_tracker.models.branch import Branch
from leave_tracker.models.employee import Employee
from leave_tracker.models.leave_record import LeaveRecord
from leave_tracker.schemas.branch import BranchCreate

logger = logging.getLogger(__name__)


def holiday_region(branch: Branch) -> str:
    return branch.region or settings.default_holiday_region


def list_branches(db: Session) -> List[Branch]:
    return db.query(Branch).order_by(Branch.name.asc()).all()


def get_branch(db: Session, branch_id: int) -> Branch:
    branch = db.get(Branch, branch_id)
    if not branch:
        raise NotFoundError("Branch", branch_id)
    return branch


def create_branch(db: Session, data: BranchCreate) -> Branch:
    name = data.name.strip()
    existing = db.query(Branch).filter(Branch.name == name).first()
    if existing:
        raise ConflictError(f"Branch '{name}' already exists", details={"branch_id": existing.id})

    branch = Branch(name=name, region=(data.region or "").strip() or None)
    db.add(branch)
    db.commit()
    db.refresh(branch)
    logger.info(f"Created branch {branch.id} ({branch.name})")
    return branch


def delete_branch(db: Session, branch_id: int) -> None:
    """Delete an empty branch. Branches with any staff or leave history are kept."""
    branch = get_branch(db, branch_id)
    staff = db.query(Employee).filter(Employee.branch_id == branch_id).count()
    leaves = db.query(LeaveRecord).filter(LeaveRecord.branch_id == branch_id).count()
    if staff or leaves:
        raise ConflictError(
            "Branch still has employees or leave records",
            details={"branch_id": branch_id, "employees": staff, "leave_records": leaves}
        )
    db.delete(branch)
    db.commit()
    logger.info(f"Deleted branch {branch_id}")
