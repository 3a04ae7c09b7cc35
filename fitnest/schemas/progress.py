"""Progress schemas."""

from pydantic import BaseModel


class UserProgressResponse(BaseModel):
    progress: int


class MemberProgressResponse(BaseModel):
    user_id: int
    progress: int


class FamilySummaryResponse(BaseModel):
    family_id: int
    name: str
    member_count: int
    average_progress: int
    members: list[MemberProgressResponse]


class PingResponse(BaseModel):
    status: str
    server_name: str
    version: str
