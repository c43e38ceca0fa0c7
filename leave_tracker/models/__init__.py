# Models package
# Importing modules here ensures they are registered with SQLAlchemy Base
from . import branch, employee, public_holiday, leave_record

# Explicit class exports for cleaner imports
from .branch import Branch
from .employee import Employee, EmployeeSchedule
from .public_holiday import PublicHoliday
from .leave_record import LeaveRecord

__all__ = [
    "Branch",
    "Employee",
    "EmployeeSchedule",
    "PublicHoliday",
    "LeaveRecord",
]
