"""Pydantic schemas for user operations."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from betgate.models.user import Role


USERNAME_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9_.\-]*$"


class UserBase(BaseModel):
    username: str
    role: Role = Role.REGULAR


class UserCreate(UserBase):
    # Usernames end up in URL paths, so no slashes or other separators.
    username: str = Field(..., min_length=1, max_length=64, pattern=USERNAME_PATTERN)
    password: str = Field(..., min_length=1, max_length=128)


class UserRead(UserBase):
    model_config = ConfigDict(from_attributes=True)


class CurrentUserRead(UserRead):
    is_banned: bool


class UserSummaryRead(BaseModel):
    username: str
    is_banned: bool

    model_config = ConfigDict(from_attributes=True)
