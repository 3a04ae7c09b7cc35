"""User account storage."""

import logging

from sqlmodel import Session, col, select

from fitnest.models.user import User
from fitnest.utils.security import hash_password

logger = logging.getLogger(__name__)


def create_user(
    session: Session,
    username: str,
    password: str,
    name: str,
    role: str = "member",
    avatar: str = "",
) -> User:
    """Create a user. Raises ValueError('duplicate:<id>:...') if the username is taken."""
    existing = get_user_by_username(session, username)
    if existing:
        logger.warning("Rejected signup for existing username %r", username)
        raise ValueError(f"duplicate:{existing.id}:Username already exists")

    user = User(
        username=username,
        password_hash=hash_password(password),
        name=name,
        role=role,
        avatar=avatar,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info("Created user %s (%s)", user.id, user.username)
    return user


def get_user(session: Session, user_id: int) -> User | None:
    return session.get(User, user_id)


def get_user_by_username(session: Session, username: str) -> User | None:
    return session.exec(select(User).where(User.username == username)).first()


def list_users(session: Session) -> list[User]:
    return list(session.exec(select(User).order_by(col(User.id))).all())
