"""Schedule events and assignees."""

import logging
from datetime import date, datetime

from sqlmodel import Session, col, select

from fitnest.models.schedule import EventAssignee, ScheduleEvent
from fitnest.models.user import User
from fitnest.utils.dt import day_window, to_naive_utc

logger = logging.getLogger(__name__)


def create_schedule_event(
    session: Session,
    title: str,
    start_time: datetime,
    end_time: datetime,
    created_by: int,
    type: str = "task",
    color: str = "primary",
) -> ScheduleEvent:
    start_time = to_naive_utc(start_time)
    end_time = to_naive_utc(end_time)
    if end_time < start_time:
        logger.warning("Rejected event %r ending before it starts", title)
        raise ValueError("invalid:end_time:End time must not be before start time")
    if not session.get(User, created_by):
        raise ValueError(f"not_found:user:User {created_by} not found")

    event = ScheduleEvent(
        title=title,
        start_time=start_time,
        end_time=end_time,
        type=type,
        color=color,
        created_by=created_by,
    )
    session.add(event)
    session.commit()
    session.refresh(event)
    logger.info("Scheduled event %s (%s) at %s", event.id, title, start_time.isoformat())
    return event


def get_schedule_event(session: Session, event_id: int) -> ScheduleEvent | None:
    return session.get(ScheduleEvent, event_id)


def get_schedule_events_by_date(session: Session, day: "date | datetime | None" = None) -> list[ScheduleEvent]:
    """Events starting on the given calendar day, earliest first."""
    start, end = day_window(day)
    return list(session.exec(
        select(ScheduleEvent)
        .where(ScheduleEvent.start_time >= start, ScheduleEvent.start_time < end)
        .order_by(col(ScheduleEvent.start_time), col(ScheduleEvent.id))
    ).all())


def assign_event_to_user(session: Session, event_id: int, user_id: int) -> EventAssignee:
    if not get_schedule_event(session, event_id):
        raise ValueError(f"not_found:event:Event {event_id} not found")
    if not session.get(User, user_id):
        raise ValueError(f"not_found:user:User {user_id} not found")

    existing = session.exec(
        select(EventAssignee).where(
            EventAssignee.event_id == event_id,
            EventAssignee.user_id == user_id,
        )
    ).first()
    if existing:
        logger.warning("User %s is already assigned to event %s", user_id, event_id)
        raise ValueError(f"duplicate:{existing.id}:User is already assigned to this event")

    assignee = EventAssignee(event_id=event_id, user_id=user_id)
    session.add(assignee)
    session.commit()
    session.refresh(assignee)
    logger.info("Assigned event %s to user %s", event_id, user_id)
    return assignee


def get_event_assignees(session: Session, event_id: int) -> list[User]:
    rows = session.exec(
        select(EventAssignee)
        .where(EventAssignee.event_id == event_id)
        .order_by(col(EventAssignee.id))
    ).all()

    seen: set[int] = set()
    users = []
    for row in rows:
        if row.user_id in seen:
            continue
        user = session.get(User, row.user_id)
        if user is None:
            continue
        seen.add(row.user_id)
        users.append(user)
    return users


def get_schedule_events_for_user(
    session: Session,
    user_id: int,
    day: "date | datetime | None" = None,
) -> list[ScheduleEvent]:
    """Events on ``day`` that the user is assigned to, earliest first."""
    start, end = day_window(day)
    assigned = select(EventAssignee.event_id).where(EventAssignee.user_id == user_id)
    return list(session.exec(
        select(ScheduleEvent)
        .where(
            ScheduleEvent.start_time >= start,
            ScheduleEvent.start_time < end,
            col(ScheduleEvent.id).in_(assigned),
        )
        .order_by(col(ScheduleEvent.start_time), col(ScheduleEvent.id))
    ).all())
