"""User schemas."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

# bcrypt only hashes the first 72 bytes
MAX_PASSWORD_BYTES = 72


class UserCreateRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    name: str = Field(min_length=1)
    role: Literal["admin", "member"] = "member"
    avatar: str = ""

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode()) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v


class UserResponse(BaseModel):
    id: int
    username: str
    name: str
    role: str
    avatar: str
