from sqlalchemy import Column, Integer, String, Date, UniqueConstraint
from leave_tracker.database import Base


class PublicHoliday(Base):
    __tablename__ = "public_holidays"
    __table_args__ = (UniqueConstraint("date", "region", name="uq_public_holiday_date_region"),)

    id = Column(Integer, primary_key=True, index=True)
    date = Column(Date, nullable=False, index=True)
    name = Column(String, nullable=False)
    region = Column(String, nullable=False, index=True)
