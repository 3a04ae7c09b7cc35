"""Family and membership schemas."""

from pydantic import BaseModel, Field


class FamilyCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    created_by: int


class FamilyResponse(BaseModel):
    id: int
    name: str
    created_by: int


class FamilyMemberCreateRequest(BaseModel):
    family_id: int
    user_id: int


class FamilyMemberResponse(BaseModel):
    id: int
    family_id: int
    user_id: int
