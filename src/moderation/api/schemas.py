"""Pydantic request/response schemas for the Moderation API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class FileReportRequest(BaseModel):
    reporter_user_id: str
    reported_item_type: str = Field(pattern="^(post|comment|review)$")
    reported_item_id: str
    reported_user_id: str | None = None
    reason: str
    description: str | None = Field(default=None, max_length=1000)


class UpdateReportStatusRequest(BaseModel):
    status: str = Field(pattern="^(pending|reviewed|resolved|dismissed)$")


class ReportActionRequest(BaseModel):
    action_type: str
    reason: str | None = None
    ban_type: str | None = None
    expires_at: datetime | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


class ReportIdResponse(BaseModel):
    report_id: str


class ActionIdResponse(BaseModel):
    action_id: str


class ReportResponse(BaseModel):
    report_id: str
    reporter_user_id: str
    reported_item_type: str
    reported_item_id: str
    reported_user_id: str | None = None
    reporter_name: str | None = None
    reported_user_name: str | None = None
    reason: str
    description: str | None = None
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ContentInfoResponse(BaseModel):
    content_type: str
    content_id: str
    user_id: str
    user_name: str | None = None
    text: str | None = None
    title: str | None = None
    rating: int | None = None
    entity_type: str | None = None
    entity_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ReportListResponse(BaseModel):
    reports: list[ReportResponse]
    count: int


class ReasonListResponse(BaseModel):
    reasons: list[str]


class ReportStatsResponse(BaseModel):
    total: int
    pending: int
    reviewed: int
    resolved: int
    dismissed: int


class AdminActionResponse(BaseModel):
    action_id: str
    admin_id: str
    report_id: str
    action_type: str
    content_type: str | None = None
    content_id: str | None = None
    target_user_id: str | None = None
    details: dict
    created_at: datetime | None = None


class WarningResponse(BaseModel):
    warning_id: str
    user_id: str
    admin_id: str
    reason: str
    content_type: str | None = None
    content_id: str | None = None
    expires_at: datetime | None = None
    created_at: datetime | None = None


class BanResponse(BaseModel):
    ban_id: str
    user_id: str
    admin_id: str
    reason: str
    ban_type: str
    expires_at: datetime | None = None
    is_active: bool
    created_at: datetime | None = None


class BanStatusResponse(BaseModel):
    user_id: str
    is_banned: bool


class DashboardStatsResponse(BaseModel):
    total_users: int
    total_entities: int
    total_reviews: int
    total_reports: int
    pending_reports: int
    pending_entity_requests: int
