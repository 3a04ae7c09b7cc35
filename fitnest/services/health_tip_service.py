"""Health tips: seeding, listing and random pick."""

import logging
import random

from sqlmodel import Session, col, func, select

from fitnest.config import settings
from fitnest.models.health_tip import HealthTip

logger = logging.getLogger(__name__)

SAMPLE_TIPS = [
    {
        "title": "Family Fitness Tip",
        "content": (
            "Try a family hike this weekend! Studies show that outdoor activities "
            "improve mood and increase vitamin D levels."
        ),
        "type": "fitness",
        "icon": "lightbulb",
    },
    {
        "title": "Nutrition Tip",
        "content": (
            "Include colorful vegetables in every meal. Different colors provide "
            "different nutrients essential for health."
        ),
        "type": "nutrition",
        "icon": "restaurant",
    },
    {
        "title": "Mental Health",
        "content": (
            "Practice mindfulness as a family. Just 5 minutes of quiet focus can "
            "reduce stress and improve concentration."
        ),
        "type": "general",
        "icon": "self_improvement",
    },
]


def seed_health_tips(session: Session) -> int:
    """Insert the sample tips if the table is empty. Returns how many were added."""
    count = session.exec(select(func.count()).select_from(HealthTip)).one()
    if count:
        return 0
    for tip in SAMPLE_TIPS:
        session.add(HealthTip(**tip))
    session.commit()
    logger.info("Seeded %d health tips", len(SAMPLE_TIPS))
    return len(SAMPLE_TIPS)


def create_health_tip(
    session: Session,
    title: str,
    content: str,
    type: str = "general",
    icon: str = "lightbulb",
) -> HealthTip:
    tip = HealthTip(title=title, content=content, type=type, icon=icon)
    session.add(tip)
    session.commit()
    session.refresh(tip)
    return tip


def get_random_health_tip(session: Session) -> HealthTip | None:
    tips = session.exec(select(HealthTip)).all()
    if not tips:
        return None
    return random.choice(tips)


def get_health_tips(session: Session, limit: int | None = None) -> list[HealthTip]:
    """Newest tips first."""
    if limit is None:
        limit = settings.health_tip_limit
    return list(session.exec(
        select(HealthTip)
        .order_by(col(HealthTip.created_at).desc(), col(HealthTip.id).desc())
        .limit(limit)
    ).all())
