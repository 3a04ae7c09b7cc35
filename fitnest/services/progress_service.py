"""Daily progress scores for users and families.

A user's score is the mean completion ratio of their active goals, as an
integer percentage. A goal is active when it has no due date or is due today
or later. Each goal's ratio is current/target clamped to [0, 1]; a goal
stored with a non-positive target counts as fully met.

Family progress is the per-member list of those scores, in membership order.
Neither function writes anything, and unknown ids give 0 / [] rather than
an error.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime

from sqlmodel import Session, col, or_, select

from fitnest.models.goal import Goal
from fitnest.services.family_service import get_family_members
from fitnest.utils.dt import start_of_day

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemberProgress:
    user_id: int
    progress: int


@dataclass(frozen=True)
class FamilySummary:
    family_id: int
    member_count: int
    average_progress: int
    members: list[MemberProgress]


def round_half_up(value: float) -> int:
    """Round .5 upwards (62.5 -> 63), unlike the built-in round()."""
    return int(math.floor(value + 0.5))


def goal_ratio(goal: Goal) -> float:
    if goal.target_value <= 0:
        return 1.0
    return min(max(goal.current_value / goal.target_value, 0.0), 1.0)


def score_goals(goals: list[Goal]) -> int:
    """Average completion of ``goals`` as a 0-100 integer (0 for no goals)."""
    if not goals:
        return 0
    total = sum(goal_ratio(goal) for goal in goals)
    return round_half_up(total / len(goals) * 100)


def get_active_goals(
    session: Session,
    user_id: int,
    today: "date | datetime | None" = None,
) -> list[Goal]:
    today_start = start_of_day(today)
    return list(session.exec(
        select(Goal)
        .where(
            Goal.user_id == user_id,
            or_(col(Goal.due_date).is_(None), col(Goal.due_date) >= today_start),
        )
        .order_by(col(Goal.id))
    ).all())


def compute_user_progress(
    session: Session,
    user_id: int,
    today: "date | datetime | None" = None,
) -> int:
    goals = get_active_goals(session, user_id, today)
    progress = score_goals(goals)
    logger.debug("User %s progress %d%% over %d active goal(s)", user_id, progress, len(goals))
    return progress


def compute_family_progress(
    session: Session,
    family_id: int,
    today: "date | datetime | None" = None,
) -> list[MemberProgress]:
    # One boundary for every member, even if the call straddles midnight.
    today_start = start_of_day(today)
    return [
        MemberProgress(
            user_id=member.id,
            progress=compute_user_progress(session, member.id, today_start),
        )
        for member in get_family_members(session, family_id)
    ]


def compute_family_summary(
    session: Session,
    family_id: int,
    today: "date | datetime | None" = None,
) -> FamilySummary:
    members = compute_family_progress(session, family_id, today)
    average = 0
    if members:
        average = round_half_up(sum(m.progress for m in members) / len(members))
    return FamilySummary(
        family_id=family_id,
        member_count=len(members),
        average_progress=average,
        members=members,
    )
