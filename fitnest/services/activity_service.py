"""Activity log and activity stat queries.

Recency sort is by date descending; activities sharing a date keep their
insertion order (id ascending).
"""

import logging
from datetime import datetime, timedelta

from sqlmodel import Session, col, select

from fitnest.config import settings
from fitnest.models.activity import Activity, ActivityStat
from fitnest.models.user import User
from fitnest.utils.dt import to_naive_utc, utcnow

logger = logging.getLogger(__name__)


def create_activity(
    session: Session,
    user_id: int,
    name: str,
    type: str,
    duration: int,
    icon: str = "directions_run",
    steps: int | None = None,
    date: datetime | None = None,
) -> Activity:
    if not session.get(User, user_id):
        raise ValueError(f"not_found:user:User {user_id} not found")

    activity = Activity(
        user_id=user_id,
        name=name,
        type=type,
        icon=icon,
        duration=duration,
        steps=steps,
    )
    if date is not None:
        activity.date = to_naive_utc(date)
    session.add(activity)
    session.commit()
    session.refresh(activity)
    logger.info("Logged activity %s (%s, %d min) for user %s", activity.id, type, duration, user_id)
    return activity


def list_activities_by_user(session: Session, user_id: int) -> list[Activity]:
    return list(session.exec(
        select(Activity).where(Activity.user_id == user_id).order_by(col(Activity.id))
    ).all())


def get_recent_activities(
    session: Session,
    user_id: int,
    limit: int | None = None,
) -> list[Activity]:
    """Most recent ``limit`` activities for a user, newest first."""
    if limit is None:
        limit = settings.recent_activity_limit
    return list(session.exec(
        select(Activity)
        .where(Activity.user_id == user_id)
        .order_by(col(Activity.date).desc(), col(Activity.id).asc())
        .limit(limit)
    ).all())


def create_activity_stat(
    session: Session,
    user_id: int,
    activity_type: str,
    value: float,
    date: datetime | None = None,
) -> ActivityStat:
    if not session.get(User, user_id):
        raise ValueError(f"not_found:user:User {user_id} not found")

    stat = ActivityStat(user_id=user_id, activity_type=activity_type, value=value)
    if date is not None:
        stat.date = to_naive_utc(date)
    session.add(stat)
    session.commit()
    session.refresh(stat)
    return stat


def get_activity_stats(
    session: Session,
    user_id: int,
    days: int | None = None,
    activity_type: str | None = None,
    now: datetime | None = None,
) -> list[ActivityStat]:
    """Stats recorded within the last ``days`` days, in insertion order.

    Optionally restricted to one ``activity_type``.
    """
    if days is None:
        days = settings.stats_window_days
    cutoff = (to_naive_utc(now) or utcnow()) - timedelta(days=days)

    query = select(ActivityStat).where(
        ActivityStat.user_id == user_id,
        ActivityStat.date >= cutoff,
    )
    if activity_type:
        query = query.where(ActivityStat.activity_type == activity_type)
    return list(session.exec(query.order_by(col(ActivityStat.id))).all())
