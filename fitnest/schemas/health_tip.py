"""Health tip schemas."""

from pydantic import BaseModel, Field


class HealthTipCreateRequest(BaseModel):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    type: str = "general"  # 'nutrition' | 'fitness' | 'general'
    icon: str = "lightbulb"


class HealthTipResponse(BaseModel):
    id: int
    title: str
    content: str
    type: str
    icon: str
    created_at: str
