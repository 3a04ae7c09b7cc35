"""FitNest Database Models."""

from fitnest.models.user import Family, FamilyMember, User
from fitnest.models.activity import Activity, ActivityStat
from fitnest.models.goal import Goal
from fitnest.models.schedule import EventAssignee, ScheduleEvent
from fitnest.models.health_tip import HealthTip

__all__ = [
    "User",
    "Family",
    "FamilyMember",
    "Activity",
    "ActivityStat",
    "Goal",
    "ScheduleEvent",
    "EventAssignee",
    "HealthTip",
]
