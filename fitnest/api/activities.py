"""Activity log & activity stats API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from fitnest.api.errors import raise_http_error
from fitnest.config import settings
from fitnest.database import get_session
from fitnest.models.activity import Activity, ActivityStat
from fitnest.schemas.activity import (
    ActivityCreateRequest,
    ActivityResponse,
    ActivityStatCreateRequest,
    ActivityStatResponse,
)
from fitnest.services.activity_service import (
    create_activity,
    create_activity_stat,
    get_activity_stats,
    get_recent_activities,
    list_activities_by_user,
)

router = APIRouter(tags=["activities"])


def _activity_to_response(activity: Activity) -> ActivityResponse:
    return ActivityResponse(
        id=activity.id,
        name=activity.name,
        type=activity.type,
        icon=activity.icon,
        duration=activity.duration,
        steps=activity.steps,
        date=activity.date.isoformat(),
        user_id=activity.user_id,
    )


def _stat_to_response(stat: ActivityStat) -> ActivityStatResponse:
    return ActivityStatResponse(
        id=stat.id,
        user_id=stat.user_id,
        date=stat.date.isoformat(),
        activity_type=stat.activity_type,
        value=stat.value,
    )


@router.post("/activities", response_model=ActivityResponse, status_code=status.HTTP_201_CREATED)
def log_activity(
    request: ActivityCreateRequest,
    session: Session = Depends(get_session),
):
    try:
        activity = create_activity(
            session,
            user_id=request.user_id,
            name=request.name,
            type=request.type,
            duration=request.duration,
            icon=request.icon,
            steps=request.steps,
            date=request.date,
        )
    except ValueError as e:
        raise_http_error(e)
    return _activity_to_response(activity)


@router.get("/users/{user_id}/activities", response_model=list[ActivityResponse])
def user_activities(user_id: int, session: Session = Depends(get_session)):
    return [_activity_to_response(a) for a in list_activities_by_user(session, user_id)]


@router.get("/users/{user_id}/recent-activities", response_model=list[ActivityResponse])
def recent_activities(
    user_id: int,
    limit: int = Query(default=settings.recent_activity_limit, ge=1, le=100),
    session: Session = Depends(get_session),
):
    """Latest activities, newest first."""
    return [_activity_to_response(a) for a in get_recent_activities(session, user_id, limit=limit)]


@router.post("/activity-stats", response_model=ActivityStatResponse, status_code=status.HTTP_201_CREATED)
def record_stat(
    request: ActivityStatCreateRequest,
    session: Session = Depends(get_session),
):
    try:
        stat = create_activity_stat(
            session,
            user_id=request.user_id,
            activity_type=request.activity_type,
            value=request.value,
            date=request.date,
        )
    except ValueError as e:
        raise_http_error(e)
    return _stat_to_response(stat)


@router.get("/users/{user_id}/activity-stats", response_model=list[ActivityStatResponse])
def user_activity_stats(
    user_id: int,
    days: int = Query(default=settings.stats_window_days, ge=1, le=366),
    activity_type: Optional[str] = Query(default=None),
    session: Session = Depends(get_session),
):
    """Stats from the last ``days`` days, optionally for one activity type."""
    stats = get_activity_stats(session, user_id, days=days, activity_type=activity_type)
    return [_stat_to_response(s) for s in stats]
