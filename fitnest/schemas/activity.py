"""Activity and activity stat schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ActivityCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    type: str
    icon: str = "directions_run"
    duration: int = Field(ge=0)  # minutes
    steps: Optional[int] = Field(default=None, ge=0)
    date: Optional[datetime] = None
    user_id: int


class ActivityResponse(BaseModel):
    id: int
    name: str
    type: str
    icon: str
    duration: int
    steps: Optional[int]
    date: str
    user_id: int


class ActivityStatCreateRequest(BaseModel):
    user_id: int
    date: Optional[datetime] = None
    activity_type: str
    value: float


class ActivityStatResponse(BaseModel):
    id: int
    user_id: int
    date: str
    activity_type: str
    value: float
