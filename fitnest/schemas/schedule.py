"""Schedule schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class ScheduleEventCreateRequest(BaseModel):
    title: str = Field(min_length=1)
    start_time: datetime
    end_time: datetime
    type: str = "task"
    color: str = "primary"
    created_by: int


class ScheduleEventResponse(BaseModel):
    id: int
    title: str
    start_time: str
    end_time: str
    type: str
    color: str
    created_by: int


class EventAssigneeCreateRequest(BaseModel):
    event_id: int
    user_id: int


class EventAssigneeResponse(BaseModel):
    id: int
    event_id: int
    user_id: int
