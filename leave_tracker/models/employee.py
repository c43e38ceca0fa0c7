"""
Employee model with its weekly work schedule.
Schedule rows use ISO weekdays (1 = Monday .. 7 = Sunday), one row per day.
"""
from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from leave_tracker.database import Base
from leave_tracker.accrual import WeeklyPattern


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    branch_id = Column(Integer, ForeignKey("branches.id"), nullable=False, index=True)

    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False, default="")
    allowed_holiday_hours = Column(Float, nullable=False, default=0.0)
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    branch = relationship("Branch", back_populates="employees")
    schedule = relationship(
        "EmployeeSchedule",
        back_populates="employee",
        cascade="all, delete-orphan",
        order_by="EmployeeSchedule.weekday",
    )

    def __repr__(self):
        return f"<Employee {self.id}: {self.full_name}>"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name or ''}".strip()

    @property
    def weekly_pattern(self) -> WeeklyPattern:
        return WeeklyPattern.from_schedule_rows(self.schedule)


class EmployeeSchedule(Base):
    __tablename__ = "employee_schedules"
    __table_args__ = (UniqueConstraint("employee_id", "weekday", name="uq_schedule_employee_weekday"),)

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    weekday = Column(Integer, nullable=False)
    hours = Column(Float, nullable=False, default=0.0)

    employee = relationship("Employee", back_populates="schedule")
