"""Pydantic request/response schemas for the Notifications API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class StatusResponse(BaseModel):
    status: str = "ok"


class NotificationResponse(BaseModel):
    notification_id: str
    recipient_user_id: str
    actor_user_id: str | None = None
    notification_type: str
    entity_type: str | None = None
    entity_id: str | None = None
    message: str
    is_read: bool
    created_at: datetime | None = None
    read_at: datetime | None = None


class NotificationListResponse(BaseModel):
    notifications: list[NotificationResponse]
    unread_count: int


class UnreadCountResponse(BaseModel):
    unread_count: int


class MarkAllReadResponse(BaseModel):
    marked: int
