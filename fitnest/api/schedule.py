"""Schedule API endpoints."""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session

from fitnest.api.errors import raise_http_error
from fitnest.api.users import user_to_response
from fitnest.database import get_session
from fitnest.models.schedule import ScheduleEvent
from fitnest.schemas.schedule import (
    EventAssigneeCreateRequest,
    EventAssigneeResponse,
    ScheduleEventCreateRequest,
    ScheduleEventResponse,
)
from fitnest.schemas.user import UserResponse
from fitnest.services.schedule_service import (
    assign_event_to_user,
    create_schedule_event,
    get_event_assignees,
    get_schedule_events_by_date,
    get_schedule_events_for_user,
)
from fitnest.utils.dt import utcnow

router = APIRouter(tags=["schedule"])


def _event_to_response(event: ScheduleEvent) -> ScheduleEventResponse:
    return ScheduleEventResponse(
        id=event.id,
        title=event.title,
        start_time=event.start_time.isoformat(),
        end_time=event.end_time.isoformat(),
        type=event.type,
        color=event.color,
        created_by=event.created_by,
    )


def _parse_day(value: Optional[str]) -> datetime:
    """Parse the ``date`` query param; today (UTC) when absent."""
    if not value:
        return utcnow()
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid date format")


@router.post("/schedule-events", response_model=ScheduleEventResponse, status_code=status.HTTP_201_CREATED)
def new_schedule_event(
    request: ScheduleEventCreateRequest,
    session: Session = Depends(get_session),
):
    try:
        event = create_schedule_event(
            session,
            title=request.title,
            start_time=request.start_time,
            end_time=request.end_time,
            created_by=request.created_by,
            type=request.type,
            color=request.color,
        )
    except ValueError as e:
        raise_http_error(e)
    return _event_to_response(event)


@router.get("/schedule-events", response_model=list[ScheduleEventResponse])
def events_for_day(
    date: Optional[str] = Query(default=None),
    session: Session = Depends(get_session),
):
    """Events starting on ``date`` (ISO format), earliest first."""
    day = _parse_day(date)
    return [_event_to_response(e) for e in get_schedule_events_by_date(session, day)]


@router.post("/event-assignees", response_model=EventAssigneeResponse, status_code=status.HTTP_201_CREATED)
def assign_event(
    request: EventAssigneeCreateRequest,
    session: Session = Depends(get_session),
):
    try:
        assignee = assign_event_to_user(session, event_id=request.event_id, user_id=request.user_id)
    except ValueError as e:
        raise_http_error(e)
    return EventAssigneeResponse(id=assignee.id, event_id=assignee.event_id, user_id=assignee.user_id)


@router.get("/schedule-events/{event_id}/assignees", response_model=list[UserResponse])
def event_assignees(event_id: int, session: Session = Depends(get_session)):
    return [user_to_response(u) for u in get_event_assignees(session, event_id)]


@router.get("/users/{user_id}/schedule", response_model=list[ScheduleEventResponse])
def user_schedule(
    user_id: int,
    date: Optional[str] = Query(default=None),
    session: Session = Depends(get_session),
):
    day = _parse_day(date)
    return [_event_to_response(e) for e in get_schedule_events_for_user(session, user_id, day)]
