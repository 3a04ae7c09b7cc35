"""Activity log and activity stat models."""

from typing import Optional

from pydantic import NaiveDatetime
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from fitnest.utils.dt import utcnow


class Activity(SQLModel, table=True):
    __tablename__ = "activities"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    type: str  # 'running' | 'weight_training' | ...
    icon: str = Field(default="directions_run")
    duration: int  # minutes
    steps: Optional[int] = None
    date: NaiveDatetime = Field(default_factory=utcnow, sa_type=DateTime, index=True)
    user_id: int = Field(foreign_key="users.id", index=True)


class ActivityStat(SQLModel, table=True):
    __tablename__ = "activity_stats"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    date: NaiveDatetime = Field(default_factory=utcnow, sa_type=DateTime, index=True)
    activity_type: str  # 'steps' | 'exercise_minutes' | ...
    value: float
