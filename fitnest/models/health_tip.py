"""Health tip model."""

from typing import Optional

from pydantic import NaiveDatetime
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from fitnest.utils.dt import utcnow


class HealthTip(SQLModel, table=True):
    __tablename__ = "health_tips"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    content: str
    type: str = Field(default="general")  # 'nutrition' | 'fitness' | 'general'
    icon: str = Field(default="lightbulb")
    created_at: NaiveDatetime = Field(default_factory=utcnow, sa_type=DateTime)
