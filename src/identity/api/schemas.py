"""Pydantic request/response schemas for the Identity API.

These are separate from Protean commands (anti-corruption pattern).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class RegisterUserRequest(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    email: str = Field(max_length=254)
    password: str = Field(min_length=6, max_length=72)
    is_admin: bool = False
    bio: str | None = Field(default=None, max_length=500)
    location: str | None = Field(default=None, max_length=100)
    profile_picture: str | None = Field(default=None, max_length=500)


class LoginRequest(BaseModel):
    email: str
    password: str


class UpdateProfileRequest(BaseModel):
    bio: str | None = Field(default=None, max_length=500)
    location: str | None = Field(default=None, max_length=100)
    profile_picture: str | None = Field(default=None, max_length=500)


class FollowRequest(BaseModel):
    follower_id: str


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


class UserIdResponse(BaseModel):
    user_id: str


class UserProfileResponse(BaseModel):
    user_id: str
    username: str
    email: str
    is_admin: bool = False
    bio: str | None = None
    location: str | None = None
    profile_picture: str | None = None
    follower_count: int = 0
    following_count: int = 0
    registered_at: datetime | None = None


class UserListResponse(BaseModel):
    users: list[UserProfileResponse]
    count: int


class LoginResponse(BaseModel):
    message: str = "Login successful"
    user: UserProfileResponse


class FollowStatusResponse(BaseModel):
    is_following: bool


class FollowEntry(BaseModel):
    user_id: str
    username: str | None = None
    profile_picture: str | None = None
    followed_at: datetime | None = None


class FollowListResponse(BaseModel):
    users: list[FollowEntry]
    count: int
