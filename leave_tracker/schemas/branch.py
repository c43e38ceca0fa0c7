from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class BranchCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    region: Optional[str] = Field(None, max_length=50)


class BranchResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    region: Optional[str] = None
    created_at: Optional[datetime] = None
