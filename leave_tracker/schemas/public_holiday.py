from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date as date_type


class PublicHolidayCreate(BaseModel):
    date: date_type
    name: str = Field(..., max_length=100)
    region: Optional[str] = Field(None, max_length=50)


class PublicHolidayResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: date_type
    name: str
    region: str
