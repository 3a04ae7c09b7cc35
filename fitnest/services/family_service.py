"""Family and membership storage.

Membership rows are kept in insertion order; that order is the order in
which members are listed everywhere, including family progress.
"""

import logging

from sqlmodel import Session, col, select

from fitnest.models.user import Family, FamilyMember, User

logger = logging.getLogger(__name__)


def create_family(session: Session, name: str, created_by: int) -> Family:
    if not session.get(User, created_by):
        raise ValueError(f"not_found:user:User {created_by} not found")

    family = Family(name=name, created_by=created_by)
    session.add(family)
    session.commit()
    session.refresh(family)
    logger.info("Created family %s (%s) by user %s", family.id, family.name, created_by)
    return family


def get_family(session: Session, family_id: int) -> Family | None:
    return session.get(Family, family_id)


def get_families_by_user(session: Session, user_id: int) -> list[Family]:
    """Families the user created, then families the user belongs to, without repeats."""
    owned = session.exec(
        select(Family).where(Family.created_by == user_id).order_by(col(Family.id))
    ).all()

    member_family_ids = session.exec(
        select(FamilyMember.family_id).where(FamilyMember.user_id == user_id)
    ).all()
    joined = []
    if member_family_ids:
        joined = session.exec(
            select(Family)
            .where(col(Family.id).in_(member_family_ids))
            .order_by(col(Family.id))
        ).all()

    seen: set[int] = set()
    families = []
    for family in list(owned) + list(joined):
        if family.id in seen:
            continue
        seen.add(family.id)
        families.append(family)
    return families


def add_family_member(session: Session, family_id: int, user_id: int) -> FamilyMember:
    """Link a user to a family.

    Raises ValueError for a missing family/user ('not_found:...') or when the
    user is already a member ('duplicate:<membership id>:...').
    """
    if not session.get(Family, family_id):
        raise ValueError(f"not_found:family:Family {family_id} not found")
    if not session.get(User, user_id):
        raise ValueError(f"not_found:user:User {user_id} not found")

    existing = session.exec(
        select(FamilyMember).where(
            FamilyMember.family_id == family_id,
            FamilyMember.user_id == user_id,
        )
    ).first()
    if existing:
        logger.warning("User %s is already a member of family %s", user_id, family_id)
        raise ValueError(f"duplicate:{existing.id}:User is already a family member")

    member = FamilyMember(family_id=family_id, user_id=user_id)
    session.add(member)
    session.commit()
    session.refresh(member)
    logger.info("Added user %s to family %s", user_id, family_id)
    return member


def get_family_members(session: Session, family_id: int) -> list[User]:
    """Resolve membership rows to users, in row order.

    Rows pointing at missing users are skipped and a user listed twice is
    returned once, at its first position.
    """
    rows = session.exec(
        select(FamilyMember)
        .where(FamilyMember.family_id == family_id)
        .order_by(col(FamilyMember.id))
    ).all()

    seen: set[int] = set()
    members = []
    for row in rows:
        if row.user_id in seen:
            continue
        user = session.get(User, row.user_id)
        if user is None:
            continue
        seen.add(row.user_id)
        members.append(user)
    return members
