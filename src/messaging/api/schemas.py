"""Pydantic request/response schemas for the Messenger API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class VerifyCodeRequest(BaseModel):
    code: str


class UsernameRequest(BaseModel):
    username: str = Field(min_length=1, max_length=20)


class SendDirectMessageRequest(BaseModel):
    sender: str = Field(min_length=1, max_length=20)
    receiver: str = Field(min_length=1, max_length=20)
    message: str = Field(min_length=1, max_length=1000)


class PostGroupMessageRequest(BaseModel):
    sender: str = Field(min_length=1, max_length=20)
    message: str = Field(min_length=1, max_length=1000)
    room: str | None = Field(default=None, max_length=50)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


class UsernameAvailableResponse(BaseModel):
    username: str
    available: bool = True


class ChatUserResponse(BaseModel):
    username: str


class P2PStatusResponse(BaseModel):
    connected: bool
    waiting: bool
    partner: str | None = None
    connection_id: str | None = None


class MessageIdResponse(BaseModel):
    message_id: str


class DirectMessageResponse(BaseModel):
    message_id: str
    sender: str
    receiver: str
    message: str
    sent_at: datetime | None = None


class DirectMessageListResponse(BaseModel):
    messages: list[DirectMessageResponse]
    count: int


class GroupMessageResponse(BaseModel):
    message_id: str
    room: str
    sender: str
    message: str
    sent_at: datetime | None = None


class GroupMessageListResponse(BaseModel):
    messages: list[GroupMessageResponse]
    count: int
