"""Schedule event and assignee models."""

from typing import Optional

from pydantic import NaiveDatetime
from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel


class ScheduleEvent(SQLModel, table=True):
    __tablename__ = "schedule_events"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    start_time: NaiveDatetime = Field(sa_type=DateTime, index=True)
    end_time: NaiveDatetime = Field(sa_type=DateTime)
    type: str = Field(default="task")  # 'exercise' | 'task' | 'meal' | ...
    color: str = Field(default="primary")
    created_by: int = Field(foreign_key="users.id")


class EventAssignee(SQLModel, table=True):
    __tablename__ = "event_assignees"
    __table_args__ = (UniqueConstraint("event_id", "user_id", name="uq_event_assignee"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    event_id: int = Field(foreign_key="schedule_events.id", index=True)
    user_id: int = Field(foreign_key="users.id", index=True)
