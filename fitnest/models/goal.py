"""Goal model."""

from typing import Optional

from pydantic import NaiveDatetime
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


class Goal(SQLModel, table=True):
    __tablename__ = "goals"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    type: str  # 'daily' | 'weekly' | ...
    target_value: int
    current_value: int = Field(default=0)
    unit: str  # 'steps' | 'minutes' | ...
    completed: bool = Field(default=False)
    user_id: int = Field(foreign_key="users.id", index=True)
    due_date: Optional[NaiveDatetime] = Field(default=None, sa_type=DateTime, index=True)
