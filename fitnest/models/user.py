"""User, Family and membership models."""

from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(unique=True, index=True)
    password_hash: str
    name: str
    role: str = Field(default="member")  # 'admin' | 'member'
    avatar: str = Field(default="")


class Family(SQLModel, table=True):
    __tablename__ = "families"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    created_by: int = Field(foreign_key="users.id", index=True)


class FamilyMember(SQLModel, table=True):
    __tablename__ = "family_members"
    __table_args__ = (UniqueConstraint("family_id", "user_id", name="uq_family_member"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    family_id: int = Field(foreign_key="families.id", index=True)
    user_id: int = Field(foreign_key="users.id", index=True)
