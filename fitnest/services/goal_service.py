"""Goal storage and partial updates."""

import logging
from datetime import datetime

from sqlmodel import Session, col, select

from fitnest.models.goal import Goal
from fitnest.models.user import User
from fitnest.utils.dt import to_naive_utc

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {
    "name",
    "type",
    "target_value",
    "current_value",
    "unit",
    "completed",
    "due_date",
}


def _check_target(target_value: int) -> None:
    if target_value <= 0:
        logger.warning("Rejected goal target %s", target_value)
        raise ValueError("invalid:target_value:Target value must be greater than zero")


def create_goal(
    session: Session,
    user_id: int,
    name: str,
    type: str,
    target_value: int,
    unit: str,
    current_value: int = 0,
    completed: bool = False,
    due_date: datetime | None = None,
) -> Goal:
    _check_target(target_value)
    if not session.get(User, user_id):
        raise ValueError(f"not_found:user:User {user_id} not found")

    goal = Goal(
        user_id=user_id,
        name=name,
        type=type,
        target_value=target_value,
        current_value=current_value,
        unit=unit,
        completed=completed,
        due_date=to_naive_utc(due_date),
    )
    session.add(goal)
    session.commit()
    session.refresh(goal)
    logger.info("Created goal %s (%s %s) for user %s", goal.id, target_value, unit, user_id)
    return goal


def get_goal(session: Session, goal_id: int) -> Goal | None:
    return session.get(Goal, goal_id)


def list_goals_by_user(session: Session, user_id: int) -> list[Goal]:
    return list(session.exec(
        select(Goal).where(Goal.user_id == user_id).order_by(col(Goal.id))
    ).all())


def update_goal(session: Session, goal_id: int, changes: dict) -> Goal | None:
    """Apply a partial update to a goal. Returns None if the goal does not exist.

    Unknown keys are ignored, as are nulls for anything but ``due_date``
    (null there clears the due date). The read-modify-write is committed as one
    transaction.
    """
    goal = session.get(Goal, goal_id)
    if not goal:
        return None

    changes = {
        k: v for k, v in changes.items()
        if k in UPDATABLE_FIELDS and (v is not None or k == "due_date")
    }
    if "target_value" in changes:
        _check_target(changes["target_value"])
    if "due_date" in changes:
        changes["due_date"] = to_naive_utc(changes["due_date"])

    for key, value in changes.items():
        setattr(goal, key, value)
    session.add(goal)
    session.commit()
    session.refresh(goal)
    logger.info("Updated goal %s: %s", goal_id, ", ".join(sorted(changes)) or "no changes")
    return goal
