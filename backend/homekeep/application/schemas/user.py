"""Pydantic DTOs for users. Password hashes never leave the service layer."""

from pydantic import Field

from .common import ApiModel


class UserCreate(ApiModel):
    username: str = Field(..., min_length=3, max_length=64, pattern=r"^[A-Za-z0-9_.-]+$")
    password: str = Field(..., min_length=8, max_length=256)


class UserResponse(ApiModel):
    id: int
    username: str
