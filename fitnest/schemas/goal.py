"""Goal schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class GoalCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    type: str
    target_value: int = Field(gt=0)
    current_value: int = Field(default=0, ge=0)
    unit: str
    completed: bool = False
    user_id: int
    due_date: Optional[datetime] = None


class GoalUpdateRequest(BaseModel):
    name: Optional[str] = None
    type: Optional[str] = None
    target_value: Optional[int] = Field(default=None, gt=0)
    current_value: Optional[int] = Field(default=None, ge=0)
    unit: Optional[str] = None
    completed: Optional[bool] = None
    due_date: Optional[datetime] = None


class GoalResponse(BaseModel):
    id: int
    name: str
    type: str
    target_value: int
    current_value: int
    unit: str
    completed: bool
    user_id: int
    due_date: Optional[str]
